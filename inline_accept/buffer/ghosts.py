from typing import MutableMapping, Optional, Tuple

from ..shared.protocol import PCaret
from ..shared.types import CompletionItem, Offset
from .text import TextBuffer


class Ghosts:
    """
    Pending completion per caret, valid only while neither the caret nor the text moved
    """

    def __init__(self, buf: TextBuffer) -> None:
        self._buf = buf
        self._shown: MutableMapping[PCaret, Tuple[Offset, int, CompletionItem]] = {}

    def show(self, caret: PCaret, item: CompletionItem) -> None:
        self._shown[caret] = caret.offset, self._buf.revision, item

    def dismiss(self, caret: PCaret) -> Optional[CompletionItem]:
        if shown := self._shown.pop(caret, None):
            _, _, item = shown
            return item
        else:
            return None

    def item_at(self, caret: PCaret) -> Optional[CompletionItem]:
        if shown := self._shown.get(caret):
            anchor, revision, item = shown
            fresh = anchor == caret.offset and revision == self._buf.revision
            return item if fresh else None
        else:
            return None
