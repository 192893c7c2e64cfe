from .types import TailEdit


def constant(new_text: str) -> TailEdit:
    return TailEdit(compute=lambda _: new_text)


def spliced(before: str, after: str, block: str = "") -> TailEdit:
    """
    Ghost text drawn around what is already after the cursor

    |...🐭<before><line_after><after>|
    <block>
    """

    def compute(line_after: str) -> str:
        return before + line_after + after + block

    return TailEdit(compute=compute)
