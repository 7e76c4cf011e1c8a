#!/usr/bin/python

from abc import abstractmethod
from typing import Optional


class AbstractCxxDemangler:

    @abstractmethod
    def demangle(self, raw: str, ansi: bool = True, params: bool = True) -> Optional[str]:
        """Demangle an Itanium C++ symbol, return the readable name or None if raw cannot be demangled.
        ansi asks for const/volatile qualifiers to be rendered, params for the parameter list."""
        raise NotImplementedError

    def strip_parameters(self, demangled: str) -> str:
        """Remove a trailing parameter list and the qualifiers following it from a demangled name"""
        end = len(demangled)
        has_qualifier = True
        while has_qualifier:
            has_qualifier = False
            for qualifier in (" const", " volatile", " &&", " &"):
                if demangled[:end].endswith(qualifier):
                    end -= len(qualifier)
                    has_qualifier = True
        if not demangled[:end].endswith(")"):
            return demangled
        depth = 0
        for index in range(end - 1, -1, -1):
            if demangled[index] == ")":
                depth += 1
            elif demangled[index] == "(":
                depth -= 1
                if depth == 0:
                    # "(anonymous namespace)" and friends are names, not parameter lists
                    return demangled[:index] if index > 0 else demangled
        return demangled
