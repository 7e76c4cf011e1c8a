"""Undo the light escaping the Rust compiler applies before Itanium mangling.

A legacy Rust symbol, after going through the C++ demangler, looks like

    _$LT$std..sys..fd..FileDesc$u20$as$u20$core..ops..Drop$GT$::drop::hc68340e1baa4987a

and stands for

    <std::sys::fd::FileDesc as core::ops::Drop>::drop

The last path component is a 64-bit hash in lowercase hex prefixed with "h".
Characters that are not legal in symbols are written as $...$ tokens, ".."
stands for "::" and a single "." for "-". Path components that do not start
with a XID_Start character get a leading "_".
"""
import logging
import string

from ..EscapeTables import RUST_HASH_LEN, RUST_HASH_PREFIX, RUST_HASH_SUFFIX_LEN, match_rust_escape

LOGGER = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(b"0123456789abcdef")
_VERBATIM = frozenset((string.ascii_letters + string.digits + ":").encode())
_PLAIN = _VERBATIM | frozenset(b"_")
_DOLLAR = ord("$")
_DOT = ord(".")
_UNDERSCORE = ord("_")
_COLON = ord(":")
_DASH = ord("-")
_PLACEHOLDER = ord("?")

# a real hash uses between 5 and 15 of the 16 possible hex digits
MIN_DISTINCT_HASH_DIGITS = 5
MAX_DISTINCT_HASH_DIGITS = 15


def _asBytes(sym):
    if isinstance(sym, str):
        return sym.encode("utf-8")
    return bytes(sym)


def is_prefixed_hash(suffix) -> bool:
    """Check for "::h" followed by exactly 16 lowercase hex digits with 5 to 15 distinct values."""
    suffix = _asBytes(suffix)
    if len(suffix) != RUST_HASH_SUFFIX_LEN or not suffix.startswith(RUST_HASH_PREFIX):
        return False
    digits = suffix[len(RUST_HASH_PREFIX):]
    if not all(digit in _HEX_DIGITS for digit in digits):
        return False
    return MIN_DISTINCT_HASH_DIGITS <= len(set(digits)) <= MAX_DISTINCT_HASH_DIGITS


def _looks_like_rust(sym, end):
    index = 0
    while index < end:
        char = sym[index]
        if char == _DOLLAR:
            escape = match_rust_escape(sym, index)
            if escape is None:
                return False
            index += len(escape[0])
        elif char == _DOT:
            if sym[index:index + 3] == b"...":
                return False
            index += 1
        elif char in _PLAIN:
            index += 1
        else:
            return False
    return True


def looks_like_rust_mangled(demangled) -> bool:
    """Decide whether a C++-demangled name is a Rust legacy symbol.

    A false positive strips a genuine path component from a non-Rust symbol,
    so the checks lean towards false negatives:

     1. the name ends in "::h" and 16 lowercase hex digits, with something before it
     2. the hash uses between 5 and 15 distinct hex digits
     3. everything before the hash is a-zA-Z0-9, "_", ":", "." or a known $...$ token
     4. there is no run of three or more dots
    """
    sym = _asBytes(demangled)
    if len(sym) <= RUST_HASH_SUFFIX_LEN:
        return False
    end = len(sym) - RUST_HASH_SUFFIX_LEN
    if not is_prefixed_hash(sym[end:]):
        return False
    return _looks_like_rust(sym, end)


def decode_rust_in_place(buf: bytearray) -> None:
    """Rewrite buf from its escaped Rust form to the readable name and drop the hash.

    buf must satisfy looks_like_rust_mangled(). Every rule consumes at least as
    many bytes as it writes, so the write cursor never overtakes the read
    cursor. An unexpected byte ends the scan with a single "?" placeholder.
    """
    never_after = len(buf)
    end = never_after - RUST_HASH_SUFFIX_LEN
    read = 0
    write = 0
    while read < end:
        char = buf[read]
        if char == _DOLLAR:
            escape = match_rust_escape(buf, read)
            if escape is None:
                break
            token, value = escape
            buf[write] = value[0]
            write += 1
            read += len(token)
        elif char == _UNDERSCORE:
            # the mangler prefixes "_" to components starting with an escape,
            # buf[read - 1] may already hold rewritten output
            at_component_start = read == 0 or buf[read - 1] == _COLON
            if at_component_start and match_rust_escape(buf, read + 1) is not None:
                read += 1
            else:
                buf[write] = char
                write += 1
                read += 1
        elif char == _DOT:
            if read + 1 < end and buf[read + 1] == _DOT:
                buf[write] = _COLON
                buf[write + 1] = _COLON
                write += 2
                read += 2
            else:
                buf[write] = _DASH
                write += 1
                read += 1
        elif char in _VERBATIM:
            buf[write] = char
            write += 1
            read += 1
        else:
            break
    if read < end:
        LOGGER.debug("Unexpected character in Rust symbol at offset %d, truncating", read)
        buf[write] = _PLACEHOLDER
        write += 1
    assert write <= never_after
    del buf[write:]


class LegacyDemangler:

    def demangle(self, demangled: str) -> str:
        """Rust-demangle an already C++-demangled name, returning it unchanged if it is not Rust"""
        if not looks_like_rust_mangled(demangled):
            return demangled
        buf = bytearray(demangled.encode("utf-8"))
        decode_rust_in_place(buf)
        return buf.decode("utf-8")
