#!/usr/bin/python

import re

from .EscapeTables import Z_ESCAPE_CHAR, Z_ESCAPES
from .RedirectSpec import RedirectSpec


# "_vg" (r|w) DDDD D "Z" (Z|U) "_"
Z_HEADER = re.compile(r"_vg(?P<kind>[rw])(?P<eclass_tag>[0-9]{4})(?P<eclass_prio>[0-9])Z(?P<fn_encoding>[ZU])_")
Z_HEADER_LEN = 12
Z_FIELD_DELIMITER = "_"
FORBIDDEN_SONAME_PREFIX = "VG_Z_"


class UnableToZDemangle(Exception):
    def __init__(self, given_str, message="Not able to Z-demangle the given string"):
        self.message = message
        self.given_str = given_str
        super().__init__(self.message)

    def __str__(self):
        return f"[{self.given_str}] {self.message}"


class MalformedHeaderError(UnableToZDemangle):
    def __init__(self, given_str, message="Symbol does not start with a valid Z-encoding header"):
        super().__init__(given_str, message)


class UnknownEscapeError(UnableToZDemangle):
    def __init__(self, given_str, message="Symbol contains an unknown Z-escape"):
        super().__init__(given_str, message)


class TruncatedSymbolError(UnableToZDemangle):
    def __init__(self, given_str, message="Soname is not terminated by '_'"):
        super().__init__(given_str, message)


class ForbiddenPrefixError(Exception):
    """Raised for a soname starting with VG_Z_, which only an unexpanded soname macro can produce."""

    def __init__(self, given_str, message="symbol with a 'VG_Z_' prefix, this indicates an unexpanded soname macro"):
        self.message = message
        self.given_str = given_str
        super().__init__(self.message)

    def __str__(self):
        return f"[{self.given_str}] {self.message}"


class ZDemangler:
    """Decoder for Z-encoded redirect specifications.

    A Z-encoded symbol packs a soname, a function name and equivalence class
    metadata into a single identifier:

        _vg(r|w)TTTTP Z(Z|U) _ <encoded soname> _ <fnname>

    where TTTT is the eclass tag and P the eclass priority. The fnname is
    Z-escaped when the encoding letter is 'Z' and taken literally for 'U'.
    """

    def decode(self, sym: str, want_soname: bool = True) -> RedirectSpec:
        """Decode sym into a RedirectSpec.

        Raises:
            MalformedHeaderError: if the fixed-width header is invalid.
            TruncatedSymbolError: if the soname field has no terminating '_'.
            UnknownEscapeError: if an escape selector is not in the Z alphabet.
            ForbiddenPrefixError: if the soname starts with VG_Z_.
        """
        header = Z_HEADER.match(sym)
        if header is None:
            raise MalformedHeaderError(sym)
        eclass_tag = int(header.group("eclass_tag"))
        eclass_prio = int(header.group("eclass_prio"))
        # tag 0000 means "no eclass", the priority must be 0 too
        if eclass_tag == 0 and eclass_prio != 0:
            raise MalformedHeaderError(sym, "Eclass priority given without an eclass tag")
        assert 0 <= eclass_tag <= 9999 and 0 <= eclass_prio <= 9

        if sym.startswith(FORBIDDEN_SONAME_PREFIX, Z_HEADER_LEN):
            raise ForbiddenPrefixError(sym)
        soname, fnname_start = self._unescape(sym, Z_HEADER_LEN, delimiter=Z_FIELD_DELIMITER)
        if soname.startswith(FORBIDDEN_SONAME_PREFIX):
            raise ForbiddenPrefixError(sym)

        if header.group("fn_encoding") == "Z":
            fnname, _ = self._unescape(sym, fnname_start)
        else:
            fnname = sym[fnname_start:]
        assert len(soname) + len(fnname) <= len(sym)
        return RedirectSpec(
            fnname,
            soname=soname if want_soname else None,
            is_wrap=header.group("kind") == "w",
            eclass_tag=eclass_tag,
            eclass_prio=eclass_prio,
        )

    def _unescape(self, sym, start, delimiter=None):
        """Decode Z-escapes from start until the delimiter (or the end of sym if None).

        Returns the decoded text and the index of the first character after the delimiter.
        """
        decoded = []
        index = start
        while True:
            if index >= len(sym):
                if delimiter is not None:
                    raise TruncatedSymbolError(sym)
                break
            char = sym[index]
            if char == delimiter:
                index += 1
                break
            if char != Z_ESCAPE_CHAR:
                decoded.append(char)
                index += 1
                continue
            selector = sym[index + 1:index + 2]
            if selector not in Z_ESCAPES:
                raise UnknownEscapeError(sym)
            decoded.append(Z_ESCAPES[selector])
            index += 2
        return "".join(decoded), index


def decode_z(sym: str, want_soname: bool = True) -> RedirectSpec:
    """Decode a Z-encoded redirect specifier, raising UnableToZDemangle on failure."""
    return ZDemangler().decode(sym, want_soname=want_soname)
