import contextlib
import io
import unittest

from . import context  # noqa: F401, puts the repository root on sys.path

import demangle
from pydemangle.DemanglerConfig import DemanglerConfig


class CliTestSuite(unittest.TestCase):

    def testVersion(self):
        output = io.StringIO()
        with contextlib.redirect_stdout(output), self.assertRaises(SystemExit):
            demangle.createParser().parse_args(["--version"])
        self.assertEqual(output.getvalue().strip(), "pydemangle " + DemanglerConfig.VERSION)

    def testSymbolsFromArguments(self):
        args = demangle.createParser().parse_args(["--no-z", "_ZN3foo3barEv", "main"])
        self.assertTrue(args.no_z)
        self.assertFalse(args.no_cxx)
        self.assertEqual(demangle.readSymbols(args), ["_ZN3foo3barEv", "main"])


if __name__ == "__main__":
    unittest.main()
