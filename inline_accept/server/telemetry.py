from concurrent.futures import Executor
from typing import Iterable, Optional

from pynvim_pp.logging import log, suppress_and_log

from ..lang import LANG
from ..shared.protocol import PObserver
from ..shared.types import Accepted


class LogObserver:
    def on_accepted(self, event: Accepted) -> None:
        msg = LANG(
            "accepted",
            feature=event.feature,
            action=event.action,
            source=event.source,
            begin=event.edit.begin,
            end=event.edit.end,
            cursor=event.edit.cursor,
        )
        log.info("%s", msg)


def _notify(observers: Iterable[PObserver], event: Accepted) -> None:
    for observer in observers:
        with suppress_and_log():
            observer.on_accepted(event)


def notify(
    executor: Optional[Executor], observers: Iterable[PObserver], event: Accepted
) -> None:
    if executor is not None:
        with suppress_and_log():
            executor.submit(_notify, tuple(observers), event)
    else:
        _notify(observers, event=event)
