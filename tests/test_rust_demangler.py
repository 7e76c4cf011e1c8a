import unittest

from pydemangle.rust_demangler import LegacyDemangler, decode_rust_in_place, demangle, is_prefixed_hash, looks_like_rust_mangled

from .context import RUST_HASH


def decode(sym):
    buf = bytearray(sym.encode("utf-8"))
    decode_rust_in_place(buf)
    return buf.decode("utf-8")


class RustHashHeuristicTestSuite(unittest.TestCase):

    def testPrefixedHash(self):
        self.assertTrue(is_prefixed_hash("::" + RUST_HASH))
        self.assertTrue(is_prefixed_hash(b"::h0123456789abcdee"))
        # too few / too many distinct digits
        self.assertFalse(is_prefixed_hash("::haaaaaaaaaaaaaaaa"))
        self.assertFalse(is_prefixed_hash("::h0101010101010101"))
        self.assertFalse(is_prefixed_hash("::h0123456789abcdef"))
        # wrong prefix, case or length
        self.assertFalse(is_prefixed_hash(":h" + RUST_HASH))
        self.assertFalse(is_prefixed_hash("::hC68340E1BAA4987A"))
        self.assertFalse(is_prefixed_hash("::hc68340e1baa4987"))
        self.assertFalse(is_prefixed_hash("::hc68340e1baa4987ab"))
        self.assertFalse(is_prefixed_hash("::hc68340e1baa4987g"))

    def testLooksLikeRust(self):
        self.assertTrue(looks_like_rust_mangled("foo::bar::" + RUST_HASH))
        self.assertTrue(looks_like_rust_mangled("f::" + RUST_HASH))
        self.assertTrue(looks_like_rust_mangled("foo..bar.baz_1::" + RUST_HASH))
        self.assertTrue(looks_like_rust_mangled("_$LT$std..sys..fd..FileDesc$u20$as$u20$core..ops..Drop$GT$::drop::" + RUST_HASH))
        self.assertTrue(looks_like_rust_mangled(b"a$C$b$SP$$BP$$RF$$LP$$RP$$u22$$u27$$u2b$$u3b$$u5b$$u5d$$u7b$$u7d$$u7e$::" + RUST_HASH.encode()))

    def testHashAloneIsNotEnough(self):
        self.assertFalse(looks_like_rust_mangled("::" + RUST_HASH))
        self.assertFalse(looks_like_rust_mangled(""))

    def testDegenerateHashIsRejected(self):
        self.assertFalse(looks_like_rust_mangled("foo::bar::haaaaaaaaaaaaaaaa"))

    def testInvalidBody(self):
        self.assertFalse(looks_like_rust_mangled("foo bar::" + RUST_HASH))
        self.assertFalse(looks_like_rust_mangled("foo(int)::" + RUST_HASH))
        self.assertFalse(looks_like_rust_mangled("foo...bar::" + RUST_HASH))
        self.assertFalse(looks_like_rust_mangled("foo$XX$bar::" + RUST_HASH))
        self.assertFalse(looks_like_rust_mangled("foo$u21$bar::" + RUST_HASH))
        self.assertFalse(looks_like_rust_mangled("foo$LT::" + RUST_HASH))
        self.assertFalse(looks_like_rust_mangled("foo::bar(int)"))
        self.assertFalse(looks_like_rust_mangled("fée::" + RUST_HASH))


class RustDecoderTestSuite(unittest.TestCase):

    def testDecodeTraitImpl(self):
        sym = "_$LT$std..sys..fd..FileDesc$u20$as$u20$core..ops..Drop$GT$::drop::" + RUST_HASH
        self.assertEqual(decode(sym), "<std::sys::fd::FileDesc as core::ops::Drop>::drop")

    def testEscapeTokens(self):
        sym = "a$C$b$SP$$BP$$RF$$LP$$RP$$u22$$u27$$u2b$$u3b$$u5b$$u5d$$u7b$$u7d$$u7e$::" + RUST_HASH
        self.assertEqual(decode(sym), "a,b@*&()\"'+;[]{}~")

    def testDots(self):
        self.assertEqual(decode("foo..bar.baz::" + RUST_HASH), "foo::bar-baz")
        self.assertEqual(decode("foo.::" + RUST_HASH), "foo-")

    def testPlainPathOnlyLosesHash(self):
        self.assertEqual(decode("std::io::Write::write_all::" + RUST_HASH), "std::io::Write::write_all")
        self.assertEqual(decode("_foo::_bar::" + RUST_HASH), "_foo::_bar")

    def testLeadingUnderscoreBeforeEscape(self):
        self.assertEqual(decode("foo::_$LT$T$GT$::bar::" + RUST_HASH), "foo::<T>::bar")
        self.assertEqual(decode("foo.._$LT$T$GT$::" + RUST_HASH), "foo::<T>")
        # only at the start of a path component
        self.assertEqual(decode("foo_$LT$T$GT$::" + RUST_HASH), "foo_<T>")
        # only in front of an escape
        self.assertEqual(decode("__foo::" + RUST_HASH), "__foo")

    def testUnderscoreAfterShrunkOutputIsKept(self):
        # once escapes shrank the output, the byte before "_" is the unrewritten "."
        self.assertEqual(decode("_$LT$a.._$GT$::" + RUST_HASH), "<a::_>")

    def testUnknownInputDegradesToPlaceholder(self):
        self.assertEqual(decode("foo$XX$bar::" + RUST_HASH), "foo?")
        self.assertEqual(decode("foo#bar::" + RUST_HASH), "foo?")

    def testOutputNeverLongerThanInput(self):
        for sym in [
            "_$LT$std..sys..fd..FileDesc$u20$as$u20$core..ops..Drop$GT$::drop::" + RUST_HASH,
            "foo..bar::" + RUST_HASH,
            "a$C$b::" + RUST_HASH,
            "foo#bar::" + RUST_HASH,
        ]:
            self.assertLessEqual(len(decode(sym)), len(sym))

    def testDecodedOutputIsNotRustAnymore(self):
        decoded = decode("_$LT$std..sys..fd..FileDesc$u20$as$u20$core..ops..Drop$GT$::drop::" + RUST_HASH)
        self.assertFalse(looks_like_rust_mangled(decoded))
        self.assertEqual(demangle(decoded), decoded)

    def testLegacyDemangler(self):
        demangler = LegacyDemangler()
        self.assertEqual(demangler.demangle("foo..bar::" + RUST_HASH), "foo::bar")
        self.assertEqual(demangler.demangle("foo::bar(int)"), "foo::bar(int)")
        self.assertEqual(demangle("foo::bar::haaaaaaaaaaaaaaaa"), "foo::bar::haaaaaaaaaaaaaaaa")


if __name__ == "__main__":
    unittest.main()
