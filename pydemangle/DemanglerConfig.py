import logging


class DemanglerConfig(object):

    # note to self: always change this in setup.py as well!
    VERSION = "1.0.0"

    ### logging configuration
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = "%(asctime)-15s: %(name)-32s - %(message)s"

    ### demangling pipeline
    # global switch for the C++ (and consequently Rust) stage, independent of per-call requests
    DEMANGLE = True
    # a soname starting with VG_Z_ means an unexpanded soname macro upstream, abort instead of degrading
    FATAL_ON_FORBIDDEN_PREFIX = True

    ### flags handed to the stage-1 C++ demangler
    CXX_ANSI = True
    CXX_PARAMS = True
