from concurrent.futures import ThreadPoolExecutor
from typing import MutableSequence
from unittest import TestCase

from pynvim_pp.logging import log

from inline_accept.server.telemetry import LogObserver, notify
from inline_accept.shared.types import Accepted, Reconciled

_EVENT = Accepted(
    feature="completion",
    action="accepted",
    source="tail",
    caret=2,
    edit=Reconciled(begin=2, end=2, new_text="x)", cursor=4),
)


class _Recorder:
    def __init__(self) -> None:
        self.events: MutableSequence[Accepted] = []

    def on_accepted(self, event: Accepted) -> None:
        self.events.append(event)


class _Broken:
    def on_accepted(self, event: Accepted) -> None:
        raise ValueError(event)


class Telemetry(TestCase):
    def test_log(self) -> None:
        with self.assertLogs(log, level="INFO") as logs:
            LogObserver().on_accepted(_EVENT)
        (line,) = logs.output
        self.assertIn("completion accepted :: tail [2, 2) -> 4", line)

    def test_inline(self) -> None:
        recorder = _Recorder()
        notify(None, observers=(_Broken(), recorder), event=_EVENT)
        self.assertEqual(recorder.events, [_EVENT])

    def test_executor(self) -> None:
        recorder = _Recorder()
        with ThreadPoolExecutor() as pool:
            notify(pool, observers=(_Broken(), recorder), event=_EVENT)
        self.assertEqual(recorder.events, [_EVENT])
