from locale import getlocale
from pathlib import Path
from string import Template
from typing import Any, Mapping, MutableMapping, Optional, Union

from pynvim_pp.lib import decode
from std2.pickle.decoder import new_decoder
from yaml import safe_load

from .consts import DEFAULT_LANG, LANG_ROOT

_DECODER = new_decoder[Mapping[str, str]](Mapping[str, str])


def _get_lang(code: Optional[str]) -> Optional[str]:
    tag = code or next(iter(getlocale()), None)
    if tag:
        primary, _, _ = tag.casefold().partition("-")
        lang, _, _ = primary.partition("_")
        return lang
    else:
        return None


def _load(path: Path) -> Mapping[str, str]:
    yml: Any = safe_load(decode(path.read_bytes()))
    return _DECODER(yml)


class _Lang:
    def __init__(self, specs: MutableMapping[str, str]) -> None:
        self._specs = specs

    def __call__(self, key: str, **kwds: Union[int, float, str]) -> str:
        spec = self._specs[key]
        return Template(spec).substitute(kwds)


LANG = _Lang({})


def init(code: Optional[str]) -> None:
    """
    Missing keys fall back to `DEFAULT_LANG`
    """

    LANG._specs.update(_load((LANG_ROOT / DEFAULT_LANG).with_suffix(".yml")))

    if (lang := _get_lang(code)) and lang != DEFAULT_LANG:
        lang_path = (LANG_ROOT / lang).with_suffix(".yml")
        if lang_path.exists():
            LANG._specs.update(_load(lang_path))


init(None)
