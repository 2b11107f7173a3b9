from __future__ import annotations
from functools import partial
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from phpdate.core.errors import InvalidArgumentError
from phpdate.core.types import Instant
from phpdate.engines.directives import BASE_DIRECTIVES, Directive

ISO_8601 = "Y-m-dTH:i:sP"
RFC_2822 = "D, d M Y H:i:s O"


class FormatEngine:
    """Evaluates PHP date()-style patterns against an Instant.

    Each pattern character found in the directive table is replaced by its value;
    every other character is copied unchanged. There is no escape character.
    """

    def __init__(self, directives: Optional[Mapping[str, Directive]] = None) -> None:
        table: Dict[str, Directive] = dict(BASE_DIRECTIVES if directives is None else directives)
        for key in table:
            if not isinstance(key, str) or len(key) != 1:
                raise InvalidArgumentError(f"Directive keys must be single characters, got {key!r}")
        table.setdefault("c", partial(self.format, pattern=ISO_8601))
        table.setdefault("r", partial(self.format, pattern=RFC_2822))
        self._directives: Mapping[str, Directive] = MappingProxyType(table)

    @property
    def directives(self) -> Mapping[str, Directive]:
        return self._directives

    def keys(self) -> List[str]:
        return sorted(self._directives)

    def format(self, instant: Instant, pattern: str) -> str:
        if not isinstance(pattern, str):
            raise InvalidArgumentError(f"Pattern must be a str, got {type(pattern).__name__}")
        if not isinstance(instant, Instant):
            raise InvalidArgumentError(f"Expected an Instant, got {type(instant).__name__}")

        out: List[str] = []
        for ch in pattern:
            fn = self._directives.get(ch)
            out.append(ch if fn is None else str(fn(instant)))
        return "".join(out)
