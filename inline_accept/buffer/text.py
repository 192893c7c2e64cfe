from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, MutableSequence, Optional, Sequence, Tuple

from ..shared.types import BoundsViolation, Offset


class Caret:
    def __init__(self, buf: "TextBuffer", offset: Offset) -> None:
        self._buf = buf
        self._offset = offset

    def __repr__(self) -> str:
        return f"Caret({self._offset})"

    @property
    def offset(self) -> Offset:
        return self._offset

    def move_to(self, offset: Offset) -> None:
        self._buf.check(offset, offset)
        self._offset = offset


@dataclass(frozen=True)
class _Snapshot:
    text: str
    carets: Sequence[Tuple[Caret, Offset]]


class TextBuffer:
    """
    In memory document + caret set

    Edits outside of a `transaction()` are not undoable
    """

    def __init__(self, text: str = "", linefeed: str = "\n") -> None:
        self._text, self._linefeed = text, linefeed
        self._carets: MutableSequence[Caret] = []
        self._depth = 0
        self._tick = 0
        self._undo: MutableSequence[_Snapshot] = []
        self._redo: MutableSequence[_Snapshot] = []

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    @property
    def revision(self) -> int:
        """
        Bumped by every change to the text, rolled back with its transaction
        """

        return self._tick

    @property
    def linefeed(self) -> str:
        return self._linefeed

    def check(self, begin: Offset, end: Offset) -> None:
        if not 0 <= begin <= end <= len(self._text):
            raise BoundsViolation((begin, end, len(self._text)))

    def add_caret(self, offset: Offset) -> Caret:
        self.check(offset, offset)
        caret = Caret(self, offset=offset)
        self._carets.append(caret)
        return caret

    def remove_caret(self, caret: Caret) -> None:
        self._carets.remove(caret)

    def all_carets(self) -> Sequence[Caret]:
        return tuple(self._carets)

    def line_end(self, offset: Offset) -> Offset:
        self.check(offset, offset)
        idx = self._text.find(self._linefeed, offset)
        return len(self._text) if idx == -1 else idx

    def text(self, begin: Offset, end: Offset) -> str:
        self.check(begin, end)
        return self._text[begin:end]

    def set_text(self, begin: Offset, end: Offset, text: str) -> None:
        self.check(begin, end)
        self._text = self._text[:begin] + text + self._text[end:]
        self._tick += 1

        delta = len(text) - (end - begin)
        for caret in self._carets:
            if caret.offset >= end:
                caret._offset += delta
            elif caret.offset > begin:
                caret._offset = begin

    def _snapshot(self) -> _Snapshot:
        return _Snapshot(
            text=self._text,
            carets=tuple((caret, caret.offset) for caret in self._carets),
        )

    def _restore(self, snapshot: _Snapshot) -> None:
        self._text = snapshot.text
        self._carets = [caret for caret, _ in snapshot.carets]
        for caret, offset in snapshot.carets:
            caret._offset = offset

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """
        Nested transactions join the outermost one
        """

        snapshot: Optional[_Snapshot] = None if self._depth else self._snapshot()
        tick = self._tick
        self._depth += 1
        try:
            yield None
        except BaseException:
            if snapshot is not None:
                self._restore(snapshot)
                self._tick = tick
            raise
        else:
            if snapshot is not None and snapshot != self._snapshot():
                self._undo.append(snapshot)
                self._redo.clear()
        finally:
            self._depth -= 1

    def undo(self) -> bool:
        if self._undo:
            self._redo.append(self._snapshot())
            self._restore(self._undo.pop())
            self._tick += 1
            return True
        else:
            return False

    def redo(self) -> bool:
        if self._redo:
            self._undo.append(self._snapshot())
            self._restore(self._redo.pop())
            self._tick += 1
            return True
        else:
            return False
