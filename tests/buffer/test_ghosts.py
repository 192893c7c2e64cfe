from unittest import TestCase

from inline_accept.buffer.ghosts import Ghosts
from inline_accept.buffer.text import TextBuffer
from inline_accept.shared.items import constant


class Lookup(TestCase):
    def test_1(self) -> None:
        buf = TextBuffer("ab")
        ghosts = Ghosts(buf)
        caret = buf.add_caret(1)
        item = constant("x")
        ghosts.show(caret, item)
        self.assertIs(ghosts.item_at(caret), item)

    def test_moved(self) -> None:
        buf = TextBuffer("ab")
        ghosts = Ghosts(buf)
        caret = buf.add_caret(1)
        ghosts.show(caret, constant("x"))
        caret.move_to(2)
        self.assertIsNone(ghosts.item_at(caret))

    def test_other_caret(self) -> None:
        buf = TextBuffer("ab")
        ghosts = Ghosts(buf)
        c1, c2 = buf.add_caret(1), buf.add_caret(1)
        ghosts.show(c1, constant("x"))
        self.assertIsNone(ghosts.item_at(c2))

    def test_dismiss(self) -> None:
        buf = TextBuffer("ab")
        ghosts = Ghosts(buf)
        caret = buf.add_caret(1)
        item = constant("x")
        ghosts.show(caret, item)
        self.assertIs(ghosts.dismiss(caret), item)
        self.assertIsNone(ghosts.item_at(caret))
        self.assertIsNone(ghosts.dismiss(caret))

    def test_text_changed(self) -> None:
        buf = TextBuffer("abcd")
        ghosts = Ghosts(buf)
        caret = buf.add_caret(1)
        ghosts.show(caret, constant("x"))
        buf.set_text(2, 4, "")
        self.assertEqual(caret.offset, 1)
        self.assertIsNone(ghosts.item_at(caret))

    def test_rolled_back(self) -> None:
        buf = TextBuffer("abcd")
        ghosts = Ghosts(buf)
        caret = buf.add_caret(1)
        item = constant("x")
        ghosts.show(caret, item)
        with self.assertRaises(RuntimeError):
            with buf.transaction():
                buf.set_text(2, 4, "")
                raise RuntimeError()
        self.assertIs(ghosts.item_at(caret), item)
