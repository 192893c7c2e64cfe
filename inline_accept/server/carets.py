from typing import Optional

from ..shared.protocol import PCaret, PCarets


def resolve_caret(carets: PCarets, caret: Optional[PCaret]) -> Optional[PCaret]:
    if caret is not None:
        return caret
    else:
        all_carets = carets.all_carets()
        # Only accept completion if there's a single caret
        if len(all_carets) == 1:
            caret, *_ = all_carets
            return caret
        else:
            return None
