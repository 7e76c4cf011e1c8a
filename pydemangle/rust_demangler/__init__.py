from .main import demangle
from .rust_legacy import LegacyDemangler, decode_rust_in_place, is_prefixed_hash, looks_like_rust_mangled
