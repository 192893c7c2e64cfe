from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Literal, Tuple, Union
from uuid import UUID, uuid4

UTF8: Literal["UTF-8"] = "UTF-8"
UTF16: Literal["UTF-16-LE"] = "UTF-16-LE"
UTF32: Literal["UTF-32-LE"] = "UTF-32-LE"
Encoding = Literal["UTF-8", "UTF-16-LE", "UTF-32-LE"]

BYTE_TRANS = {
    UTF8: 1,
    UTF16: 2,
    UTF32: 4,
}

Offset = int

# (row, col), col counted in code units of some `Encoding`, like LSP
WTF8Pos = Tuple[int, int]


class BoundsViolation(Exception): ...


@dataclass(frozen=True)
class RangeEdit:
    """
    End exclusive, like LSP
    """

    begin: Offset
    end: Offset
    new_text: str


@dataclass(frozen=True)
class TailEdit:
    """
    |...   line_before   🐭<compute(line_after)>|
    """

    compute: Callable[[str], str]


CompletionItem = Union[RangeEdit, TailEdit]


@dataclass(frozen=True)
class Reconciled:
    begin: Offset
    end: Offset
    new_text: str
    cursor: Offset


class Outcome(Enum):
    applied = auto()
    not_applicable = auto()


@dataclass(frozen=True)
class Capabilities:
    agent_connected: bool


@dataclass(frozen=True)
class Accepted:
    feature: str
    action: str
    source: str
    caret: Offset
    edit: Reconciled
    uid: UUID = field(default_factory=uuid4)
