import argparse
import json
import logging
import sys

from pydemangle.Demangler import Demangler
from pydemangle.DemanglerConfig import DemanglerConfig
from pydemangle.ZDemangler import ForbiddenPrefixError


def createParser():
    parser = argparse.ArgumentParser(description='Demo: Use pydemangle to turn raw symbol names (Z-encoded, C++ and Rust mangled) into readable names.')
    parser.add_argument('--no-cxx', action='store_true', default=False, help='Skip C++ and Rust demangling.')
    parser.add_argument('--no-z', action='store_true', default=False, help='Skip Z-decoding of redirect specifications.')
    parser.add_argument('-z', '--z-only', action='store_true', default=False, help='Only Z-decode and print the full redirect specification (JSON format).')
    parser.add_argument('-v', '--verbose', action='store_true', default=False, help='Enable debug logging.')
    parser.add_argument('--version', action='version', version='pydemangle {}'.format(DemanglerConfig.VERSION))
    parser.add_argument('symbols', type=str, nargs='*', help='Symbols to demangle, read from stdin (one per line) if omitted.')
    return parser


def readSymbols(args):
    if args.symbols:
        return args.symbols
    return [line.strip() for line in sys.stdin if line.strip()]


if __name__ == "__main__":
    ARGS = createParser().parse_args()

    config = DemanglerConfig()
    if ARGS.verbose:
        config.LOG_LEVEL = logging.DEBUG
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    DEMANGLER = Demangler(config)
    try:
        for symbol in readSymbols(ARGS):
            if ARGS.z_only:
                redirect_spec = DEMANGLER.maybeZDemangle(symbol, want_soname=True)
                print(json.dumps(redirect_spec.toDict() if redirect_spec else None, sort_keys=True))
            else:
                print(DEMANGLER.demangle(not ARGS.no_cxx, not ARGS.no_z, symbol))
    except ForbiddenPrefixError as exc:
        logging.critical("%s - see the redirect naming conventions for an explanation.", exc)
        sys.exit(1)
