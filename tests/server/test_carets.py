from unittest import TestCase

from inline_accept.buffer.text import TextBuffer
from inline_accept.server.carets import resolve_caret


class ResolveCaret(TestCase):
    def test_explicit(self) -> None:
        buf = TextBuffer("abc")
        c1, c2 = buf.add_caret(0), buf.add_caret(2)
        self.assertIs(resolve_caret(buf, caret=c2), c2)
        self.assertIsNot(resolve_caret(buf, caret=c2), c1)

    def test_single(self) -> None:
        buf = TextBuffer("abc")
        caret = buf.add_caret(1)
        self.assertIs(resolve_caret(buf, caret=None), caret)

    def test_none(self) -> None:
        buf = TextBuffer("abc")
        self.assertIsNone(resolve_caret(buf, caret=None))

    def test_multi(self) -> None:
        buf = TextBuffer("abc")
        buf.add_caret(0)
        buf.add_caret(3)
        self.assertIsNone(resolve_caret(buf, caret=None))
