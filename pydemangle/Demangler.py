import logging
from typing import Optional

from pydemangle.cxx.CxxfiltDemangler import CxxfiltDemangler
from pydemangle.DemanglerConfig import DemanglerConfig
from pydemangle.RedirectSpec import RedirectSpec
from pydemangle.rust_demangler import decode_rust_in_place, looks_like_rust_mangled
from pydemangle.ZDemangler import ForbiddenPrefixError, MalformedHeaderError, UnableToZDemangle, ZDemangler

LOGGER = logging.getLogger(__name__)

CXX_MANGLING_MARKER = "_Z"


class Demangler:
    """Turns raw symbol names into something a human can read.

    Mangling pushes a name through up to three stages, demangling undoes them
    in reverse order:

     0. Rust names are lightly escaped by the Rust front end.
     1. The name is subject to standard C++ (Itanium) mangling.
     2. Rarely, the result is Z-encoded to become part of a redirect specification.

    demangle() first tries to undo (2), discarding the soname. If asked to, it
    then undoes (1) and, only when that succeeded, (0). Rust decoding rewrites
    the buffer returned by the C++ stage, which is owned by this Demangler.

    The result of the last successful C++ demangling is kept in the
    `demangled` attribute and is replaced by the next call that reaches the
    C++ stage. Returned strings are independent copies.
    """

    def __init__(self, config=None, cxx_demangler=None):
        if config is None:
            config = DemanglerConfig()
        self.config = config
        if cxx_demangler is None:
            cxx_demangler = CxxfiltDemangler()
        self.cxx_demangler = cxx_demangler
        self._z_demangler = ZDemangler()
        # buffer holding the most recent stage-1 result
        self.demangled = None

    def maybeZDemangle(self, sym: str, want_soname: bool = False) -> Optional[RedirectSpec]:
        """Attempt to Z-demangle sym, return None if it is not a valid Z-encoded name.
        ForbiddenPrefixError is not caught, it indicates a bug in whatever produced the symbol."""
        try:
            return self._z_demangler.decode(sym, want_soname=want_soname)
        except MalformedHeaderError:
            LOGGER.debug("Not a Z-encoded name: %s", sym)
        except UnableToZDemangle as exc:
            LOGGER.warning("error Z-demangling: %s (%s)", sym, exc.message)
        return None

    def _zDemangle(self, sym):
        try:
            redirect_spec = self.maybeZDemangle(sym)
        except ForbiddenPrefixError:
            if self.config.FATAL_ON_FORBIDDEN_PREFIX:
                raise
            LOGGER.error("Ignoring Z-encoded symbol with forbidden soname prefix: %s", sym)
            return sym
        return redirect_spec.fnname if redirect_spec is not None else sym

    def _cxxDemangle(self, sym):
        # the single place where the previous result is released
        self.demangled = None
        demangled = self.cxx_demangler.demangle(sym, ansi=self.config.CXX_ANSI, params=self.config.CXX_PARAMS)
        if demangled is None:
            return sym
        self.demangled = bytearray(demangled.encode("utf-8"))
        # only safe on a buffer we own, which is why Rust decoding is tied to stage-1 success
        if looks_like_rust_mangled(self.demangled):
            decode_rust_in_place(self.demangled)
        return self.demangled.decode("utf-8")

    def demangle(self, do_cxx: bool, do_z: bool, raw: str) -> str:
        """Demangle raw, optionally undoing Z-encoding (do_z) and C++/Rust mangling (do_cxx)"""
        current = raw
        if do_z:
            current = self._zDemangle(current)
        if do_cxx and self.config.DEMANGLE and current.startswith(CXX_MANGLING_MARKER):
            current = self._cxxDemangle(current)
        return current
