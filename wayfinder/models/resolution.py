# wayfinder/models/resolution.py
"""Result types returned by :func:`wayfinder.resolver.resolve_detailed`."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar, Union

from .route import URLRoute

D = TypeVar("D")


class UnresolvedReason(Enum):
    UNPARSEABLE = "unparseable"
    UNSUPPORTED_SCHEME = "unsupported_scheme"
    NO_SEGMENTS = "no_segments"
    NO_DESTINATIONS = "no_destinations"


@dataclass(frozen=True)
class Resolved(Generic[D]):
    destinations: List[D]
    route: URLRoute

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Unresolved:
    reason: UnresolvedReason
    url: Any = None
    route: Optional[URLRoute] = None  # set when parsing succeeded

    @property
    def destinations(self) -> None:
        return None

    def __bool__(self) -> bool:
        return False


Resolution = Union[Resolved, Unresolved]
