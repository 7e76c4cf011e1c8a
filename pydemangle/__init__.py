import threading

from .Demangler import Demangler
from .DemanglerConfig import DemanglerConfig
from .RedirectSpec import RedirectSpec
from .ZDemangler import (
    ForbiddenPrefixError,
    MalformedHeaderError,
    TruncatedSymbolError,
    UnableToZDemangle,
    UnknownEscapeError,
    decode_z,
)
from .ZEncoder import UnableToZEncode, z_encode

# one Demangler (and thus one result buffer) per thread
_THREAD_STATE = threading.local()


def get_demangler() -> Demangler:
    demangler = getattr(_THREAD_STATE, "demangler", None)
    if demangler is None:
        demangler = Demangler()
        _THREAD_STATE.demangler = demangler
    return demangler


def demangle(do_cxx: bool, do_z: bool, raw: str) -> str:
    return get_demangler().demangle(do_cxx, do_z, raw)


def maybe_z_demangle(sym: str, want_soname: bool = False):
    return get_demangler().maybeZDemangle(sym, want_soname=want_soname)
