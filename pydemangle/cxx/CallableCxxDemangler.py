#!/usr/bin/python

from typing import Callable, Optional

from .AbstractCxxDemangler import AbstractCxxDemangler


class CallableCxxDemangler(AbstractCxxDemangler):
    """Adapts a plain function str -> Optional[str] into a stage-1 demangler"""

    def __init__(self, demangle_function: Callable[[str], Optional[str]]):
        self._demangle_function = demangle_function

    def demangle(self, raw: str, ansi: bool = True, params: bool = True) -> Optional[str]:
        demangled = self._demangle_function(raw)
        if demangled is not None and not params:
            demangled = self.strip_parameters(demangled)
        return demangled
