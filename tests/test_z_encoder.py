import unittest

from pydemangle.ZDemangler import ZDemangler
from pydemangle.ZEncoder import UnableToZEncode, z_encode, z_escape


class ZEncoderTestSuite(unittest.TestCase):

    def testEncodeReplacement(self):
        self.assertEqual(z_encode("libc.so*", "malloc"), "_vgr00000ZZ_libcZdsoZa_malloc")

    def testEncodeWrapperWithLiteralName(self):
        self.assertEqual(
            z_encode("libc.so.6", "memcpy", is_wrap=True, eclass_tag=1001, eclass_prio=5, encode_fnname=False),
            "_vgw10015ZU_libcZdsoZd6_memcpy",
        )

    def testEscaping(self):
        self.assertEqual(z_escape("libstdc++*"), "libstdcZpZpZa")
        self.assertEqual(z_escape("_Znwm"), "ZuZZnwm")
        self.assertEqual(z_escape("NONE"), "NONE")
        with self.assertRaises(UnableToZEncode):
            z_escape("a,b")

    def testDecodeReversesEncode(self):
        pairs = [
            ("libc.so*", "malloc"),
            ("libstdc++*", "_Znwm"),
            ("ld-linux-x86-64.so.2", "operator new(unsigned long)"),
            ("NONE", "__GI_strlen"),
            ("libpthread.so.0", "pthread_mutex_lock@*"),
            ("", "%$/Z"),
        ]
        demangler = ZDemangler()
        for soname, fnname in pairs:
            spec = demangler.decode(z_encode(soname, fnname, eclass_tag=42, eclass_prio=3))
            self.assertEqual((spec.soname, spec.fnname), (soname, fnname))
            self.assertEqual((spec.eclass_tag, spec.eclass_prio), (42, 3))

    def testInvalidEclass(self):
        with self.assertRaises(UnableToZEncode):
            z_encode("libc.so*", "malloc", eclass_tag=10000)
        with self.assertRaises(UnableToZEncode):
            z_encode("libc.so*", "malloc", eclass_tag=1, eclass_prio=10)
        with self.assertRaises(UnableToZEncode):
            z_encode("libc.so*", "malloc", eclass_prio=2)

    def testInvalidNames(self):
        with self.assertRaises(UnableToZEncode):
            z_encode("libc.so*", "", encode_fnname=False)
        with self.assertRaises(UnableToZEncode):
            z_encode("VG_Z_LIBC_SONAME", "malloc")
        # the encoder error is a ValueError
        with self.assertRaises(ValueError):
            z_encode("libc,so", "malloc")


if __name__ == "__main__":
    unittest.main()
