from std2.types import never

from ..shared.protocol import PDocument
from ..shared.types import CompletionItem, Offset, RangeEdit, Reconciled, TailEdit


def _range_edit_trans(edit: RangeEdit) -> Reconciled:
    inst = Reconciled(
        begin=edit.begin,
        end=edit.end,
        new_text=edit.new_text,
        cursor=edit.begin + len(edit.new_text),
    )
    return inst


def _tail_edit_trans(document: PDocument, caret: Offset, edit: TailEdit) -> Reconciled:
    line_end = document.line_end(caret)
    line_after = document.text(caret, line_end)
    new_text = edit.compute(line_after)

    # `in` is textual, an unrelated occurrence of `line_after` also counts
    missing = "" if line_after in new_text else line_after
    final = new_text + missing

    inst = Reconciled(
        begin=caret,
        end=line_end,
        new_text=final,
        cursor=caret + len(final),
    )
    return inst


def reconcile(document: PDocument, caret: Offset, item: CompletionItem) -> Reconciled:
    if isinstance(item, RangeEdit):
        return _range_edit_trans(item)
    elif isinstance(item, TailEdit):
        return _tail_edit_trans(document, caret=caret, edit=item)
    else:
        never(item)
