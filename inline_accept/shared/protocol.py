from typing import ContextManager, Optional, Protocol, Sequence

from .types import Accepted, CompletionItem, Offset


class PDocument(Protocol):
    def __len__(self) -> int: ...

    def line_end(self, offset: Offset) -> Offset: ...

    def text(self, begin: Offset, end: Offset) -> str: ...

    def set_text(self, begin: Offset, end: Offset, text: str) -> None: ...


class PCaret(Protocol):
    @property
    def offset(self) -> Offset: ...

    def move_to(self, offset: Offset) -> None: ...


class PCarets(Protocol):
    def all_carets(self) -> Sequence[PCaret]: ...


class PTransactor(Protocol):
    def transaction(self) -> ContextManager[None]: ...


class PLookup(Protocol):
    def item_at(self, caret: PCaret) -> Optional[CompletionItem]: ...


class PObserver(Protocol):
    def on_accepted(self, event: Accepted) -> None: ...
