from ..lang import LANG
from ..shared.protocol import PCaret, PDocument, PTransactor
from ..shared.types import BoundsViolation, Reconciled


def in_bounds(document: PDocument, edit: Reconciled) -> bool:
    return 0 <= edit.begin <= edit.end <= len(document)


def apply(
    transactor: PTransactor, document: PDocument, caret: PCaret, edit: Reconciled
) -> None:
    """
    Text and caret move land together or not at all

    Raises `BoundsViolation` before touching the document
    """

    with transactor.transaction():
        if not in_bounds(document, edit=edit):
            msg = LANG(
                "out of bounds",
                begin=edit.begin,
                end=edit.end,
                length=len(document),
            )
            raise BoundsViolation(msg)

        document.set_text(edit.begin, edit.end, edit.new_text)
        caret.move_to(edit.cursor)
