from concurrent.futures import Executor
from logging import DEBUG as DEBUG_LV
from logging import INFO
from os import environ
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from pynvim_pp.lib import decode
from pynvim_pp.logging import log
from std2.graphlib import merge
from std2.pickle.decoder import new_decoder
from yaml import safe_load

from ..consts import CONFIG_YML, DEBUG, SETTINGS_VAR
from ..lang import LANG
from ..shared.protocol import PObserver
from ..shared.settings import Settings
from .accept import Acceptor
from .rt_types import ValidationError
from .telemetry import LogObserver


def _set_debug() -> None:
    if DEBUG:
        log.setLevel(DEBUG_LV)
    else:
        log.setLevel(INFO)


def _user_config() -> Mapping[str, Any]:
    if path := environ.get(SETTINGS_VAR):
        return safe_load(decode(Path(path).read_bytes())) or {}
    else:
        return {}


def settings(user_config: Optional[Mapping[str, Any]] = None) -> Settings:
    yml = safe_load(decode(CONFIG_YML.read_bytes()))
    u_conf = _user_config() if user_config is None else user_config

    merged = merge(yml, u_conf, replace=True)
    config = new_decoder[Settings](Settings)(merged)

    if config.telemetry.enabled and not (
        config.telemetry.feature and config.telemetry.action
    ):
        reason = "telemetry.feature / telemetry.action"
        raise ValidationError(LANG("bad settings", reason=reason))

    return config


def acceptor(
    settings: Settings,
    observers: Iterable[PObserver] = (),
    executor: Optional[Executor] = None,
) -> Acceptor:
    _set_debug()
    log_observer = (LogObserver(),) if settings.telemetry.enabled else ()
    return Acceptor(
        settings,
        observers=(*log_observer, *observers),
        executor=executor,
    )
