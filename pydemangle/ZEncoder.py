from .EscapeTables import Z_ESCAPE_CHAR, Z_UNESCAPES
from .ZDemangler import FORBIDDEN_SONAME_PREFIX


class UnableToZEncode(ValueError):
    def __init__(self, given_str, message="Not able to Z-encode the given string"):
        self.message = message
        self.given_str = given_str
        super().__init__(self.message)

    def __str__(self):
        return f"[{self.given_str}] {self.message}"


def z_escape(text: str) -> str:
    """Z-escape text, letters and digits pass through unchanged."""
    encoded = []
    for char in text:
        if char in Z_UNESCAPES:
            encoded.append(Z_ESCAPE_CHAR + Z_UNESCAPES[char])
        elif char.isascii() and char.isalnum():
            encoded.append(char)
        else:
            raise UnableToZEncode(text, f"Character {char!r} has no Z-encoding")
    return "".join(encoded)


def z_encode(soname: str, fnname: str, is_wrap=False, eclass_tag=0, eclass_prio=0, encode_fnname=True) -> str:
    """Build a Z-encoded redirect specifier, the inverse of ZDemangler.decode().

    With encode_fnname=False the function name is stored literally ("ZU" form),
    which only works for names that are already valid symbol characters.
    """
    if not 0 <= eclass_tag <= 9999 or not 0 <= eclass_prio <= 9:
        raise UnableToZEncode(fnname, "Eclass tag must be in [0, 9999] and priority in [0, 9]")
    if eclass_tag == 0 and eclass_prio != 0:
        raise UnableToZEncode(fnname, "Eclass priority given without an eclass tag")
    if soname.startswith(FORBIDDEN_SONAME_PREFIX):
        raise UnableToZEncode(soname, "Sonames starting with VG_Z_ are reserved")
    if encode_fnname:
        encoded_fnname = z_escape(fnname)
    else:
        if not fnname:
            raise UnableToZEncode(fnname, "A literal function name must not be empty")
        encoded_fnname = fnname
    return "_vg{}{:04d}{}Z{}_{}_{}".format(
        "w" if is_wrap else "r",
        eclass_tag,
        eclass_prio,
        "Z" if encode_fnname else "U",
        z_escape(soname),
        encoded_fnname,
    )
