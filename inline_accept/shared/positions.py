from itertools import accumulate
from typing import Sequence

from pynvim_pp.lib import encode

from .settings import PositionOptions
from .types import BYTE_TRANS, Encoding, Offset, RangeEdit, WTF8Pos


def _line_offsets(lines: Sequence[str], linefeed: str) -> Sequence[Offset]:
    return (0, *accumulate(len(line) + len(linefeed) for line in lines[:-1]))


def _col(line: str, col: int, encoding: Encoding) -> int:
    """
    A col inside a multi unit char rounds down to that char
    """

    if encoding not in BYTE_TRANS:
        raise ValueError(f"Unknown encoding -- {encoding}")

    width = BYTE_TRANS[encoding]
    units = 0
    for idx, char in enumerate(line):
        units += len(encode(char, encoding=encoding)) // width
        if units > col:
            return idx
    else:
        return len(line)


def to_offset(text: str, linefeed: str, pos: WTF8Pos, encoding: Encoding) -> Offset:
    """
    Past the last row -> end of text, past the line end -> line end
    """

    lines = text.split(linefeed)
    row, col = pos
    if row < 0:
        return 0
    elif row >= len(lines):
        return len(text)
    else:
        line = lines[row]
        offsets = _line_offsets(lines, linefeed=linefeed)
        return offsets[row] + min(len(line), _col(line, col=col, encoding=encoding))


def range_edit(
    text: str,
    linefeed: str,
    begin: WTF8Pos,
    end: WTF8Pos,
    new_text: str,
    encoding: Encoding,
) -> RangeEdit:
    lo, hi = sorted((begin, end))
    edit = RangeEdit(
        begin=to_offset(text, linefeed=linefeed, pos=lo, encoding=encoding),
        end=to_offset(text, linefeed=linefeed, pos=hi, encoding=encoding),
        new_text=new_text,
    )
    return edit


def range_edit_adjusted(
    options: PositionOptions, text: str, begin: WTF8Pos, end: WTF8Pos, new_text: str
) -> RangeEdit:
    return range_edit(
        text,
        linefeed=options.linefeed,
        begin=begin,
        end=end,
        new_text=new_text,
        encoding=options.encoding,
    )
