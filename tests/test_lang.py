from unittest import TestCase

from inline_accept.lang import LANG, init


class Lang(TestCase):
    def test_1(self) -> None:
        self.assertEqual(LANG("bad settings", reason="x"), "invalid settings -- x")

    def test_missing_lang(self) -> None:
        init("zz_ZZ")
        self.assertEqual(
            LANG("no completion", offset=3), "no completion at 3"
        )
