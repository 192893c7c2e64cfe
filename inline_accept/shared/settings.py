from dataclasses import dataclass
from typing import Literal

from .types import Encoding


@dataclass(frozen=True)
class AcceptOptions:
    agent_connected: bool


@dataclass(frozen=True)
class PositionOptions:
    encoding: Encoding
    linefeed: Literal["\r\n", "\n", "\r"]


@dataclass(frozen=True)
class Telemetry:
    enabled: bool
    feature: str
    action: str


@dataclass(frozen=True)
class Settings:
    accept: AcceptOptions
    positions: PositionOptions
    telemetry: Telemetry
