"""Fixed character mappings used by the Z-encoding and the Rust legacy mangling.

Z-encoding escapes a character as "Z" followed by a single selector letter.
Rust escapes characters that are illegal in symbols as "$name$" tokens.
"""

Z_ESCAPE_CHAR = "Z"

# selector letter -> decoded character
Z_ESCAPES = {
    "a": "*",
    "c": ":",
    "d": ".",
    "h": "-",
    "p": "+",
    "s": " ",
    "u": "_",
    "A": "@",
    "D": "$",
    "L": "(",
    "P": "%",
    "R": ")",
    "S": "/",
    "Z": "Z",
}

# decoded character -> selector letter
Z_UNESCAPES = {value: key for key, value in Z_ESCAPES.items()}

# token -> decoded character
RUST_ESCAPES = {
    b"$C$": b",",
    b"$SP$": b"@",
    b"$BP$": b"*",
    b"$RF$": b"&",
    b"$LT$": b"<",
    b"$GT$": b">",
    b"$LP$": b"(",
    b"$RP$": b")",
    b"$u20$": b" ",
    b"$u22$": b'"',
    b"$u27$": b"'",
    b"$u2b$": b"+",
    b"$u3b$": b";",
    b"$u5b$": b"[",
    b"$u5d$": b"]",
    b"$u7b$": b"{",
    b"$u7d$": b"}",
    b"$u7e$": b"~",
}

RUST_HASH_PREFIX = b"::h"
RUST_HASH_LEN = 16
RUST_HASH_SUFFIX_LEN = len(RUST_HASH_PREFIX) + RUST_HASH_LEN

# longest tokens first among those sharing the "$" prefix
_RUST_ESCAPES_BY_LENGTH = sorted(RUST_ESCAPES.items(), key=lambda item: -len(item[0]))


def match_rust_escape(buffer, offset):
    """Return (token, character) for the Rust escape token starting at offset, else None."""
    for token, value in _RUST_ESCAPES_BY_LENGTH:
        if buffer[offset:offset + len(token)] == token:
            return token, value
    return None
