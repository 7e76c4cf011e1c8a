#!/usr/bin/python

import logging
from typing import Optional

import cxxfilt

from .AbstractCxxDemangler import AbstractCxxDemangler

LOGGER = logging.getLogger(__name__)


class CxxfiltDemangler(AbstractCxxDemangler):
    """Stage-1 demangler backed by __cxa_demangle of the system C++ runtime, through cxxfilt.

    __cxa_demangle always renders qualifiers, so ansi has no effect here.
    """

    def demangle(self, raw: str, ansi: bool = True, params: bool = True) -> Optional[str]:
        try:
            demangled = cxxfilt.demangle(raw, external_only=True)
        except cxxfilt.InvalidName:
            LOGGER.debug("Not a valid C++ mangled name: %s", raw)
            return None
        # names not starting with _Z come back untouched
        if not demangled or demangled == raw:
            return None
        if not params:
            demangled = self.strip_parameters(demangled)
        return demangled
