from concurrent.futures import Executor
from dataclasses import dataclass
from pprint import pformat
from typing import Iterable, MutableSequence, Optional, Tuple

from pynvim_pp.logging import log
from std2.types import never

from ..consts import DEBUG
from ..lang import LANG
from ..shared.protocol import (
    PCaret,
    PCarets,
    PDocument,
    PLookup,
    PObserver,
    PTransactor,
)
from ..shared.settings import Settings
from ..shared.types import (
    Accepted,
    BoundsViolation,
    Capabilities,
    CompletionItem,
    Outcome,
    RangeEdit,
    TailEdit,
)
from .carets import resolve_caret
from .reconcile import reconcile
from .telemetry import notify
from .transaction import apply


@dataclass(frozen=True)
class Editor:
    """
    Host objects, borrowed for the duration of one call
    """

    document: PDocument
    carets: PCarets
    transactor: PTransactor
    lookup: PLookup


def _source(item: CompletionItem) -> str:
    if isinstance(item, RangeEdit):
        return "agent"
    elif isinstance(item, TailEdit):
        return "tail"
    else:
        never(item)


def _acceptable(caps: Capabilities, item: CompletionItem) -> bool:
    # Agent completions carry their own range, everything else is a tail
    if caps.agent_connected:
        return isinstance(item, RangeEdit)
    else:
        return isinstance(item, TailEdit)


class Acceptor:
    def __init__(
        self,
        settings: Settings,
        observers: Iterable[PObserver] = (),
        executor: Optional[Executor] = None,
    ) -> None:
        self._settings = settings
        self._observers: MutableSequence[PObserver] = [*observers]
        self._executor = executor

    def subscribe(self, observer: PObserver) -> None:
        self._observers.append(observer)

    def _caps(self, caps: Optional[Capabilities]) -> Capabilities:
        return caps or Capabilities(
            agent_connected=self._settings.accept.agent_connected
        )

    def _pending(
        self, editor: Editor, caps: Capabilities, caret: Optional[PCaret]
    ) -> Optional[Tuple[PCaret, CompletionItem]]:
        target = resolve_caret(editor.carets, caret=caret)
        if target is None:
            count = len(editor.carets.all_carets())
            log.debug("%s", LANG("ambiguous carets", count=count))
            return None

        item = editor.lookup.item_at(target)
        if item is None:
            log.debug("%s", LANG("no completion", offset=target.offset))
            return None
        elif not _acceptable(caps, item=item):
            msg = LANG(
                "wrong provenance",
                kind=_source(item),
                connected=str(caps.agent_connected),
            )
            log.debug("%s", msg)
            return None
        else:
            return target, item

    def available(
        self,
        editor: Editor,
        caps: Optional[Capabilities] = None,
        caret: Optional[PCaret] = None,
    ) -> bool:
        return self._pending(editor, caps=self._caps(caps), caret=caret) is not None

    def accept(
        self,
        editor: Editor,
        caps: Optional[Capabilities] = None,
        caret: Optional[PCaret] = None,
    ) -> Outcome:
        pending = self._pending(editor, caps=self._caps(caps), caret=caret)
        if pending is None:
            return Outcome.not_applicable

        target, item = pending
        offset, length = target.offset, len(editor.document)
        if not 0 <= offset <= length:
            msg = LANG("out of bounds", begin=offset, end=offset, length=length)
            log.warning("%s", msg)
            return Outcome.not_applicable

        edit = reconcile(editor.document, caret=offset, item=item)
        if DEBUG:
            log.debug("%s", pformat((item, edit)))

        try:
            apply(
                editor.transactor,
                document=editor.document,
                caret=target,
                edit=edit,
            )
        except BoundsViolation as e:
            log.warning("%s", e)
            return Outcome.not_applicable

        event = Accepted(
            feature=self._settings.telemetry.feature,
            action=self._settings.telemetry.action,
            source=_source(item),
            caret=offset,
            edit=edit,
        )
        notify(self._executor, observers=self._observers, event=event)
        return Outcome.applied
