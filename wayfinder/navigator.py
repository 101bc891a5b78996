# wayfinder/navigator.py
from typing import Callable, List, Optional

from .destination import FactoryLike
from .resolver import DestinationResolver


class Navigator:
    """Resolves a link and hands the destinations to ``apply`` in one call."""

    def __init__(self, resolver: Optional[DestinationResolver] = None):
        self.resolver = resolver or DestinationResolver()

    def navigate(self, url, factory: FactoryLike, apply: Callable[[List], None]) -> bool:
        destinations = self.resolver.resolve(url, factory)
        if destinations is None:
            return False
        apply(destinations)
        return True


def navigate(url, factory: FactoryLike, apply: Callable[[List], None]) -> bool:
    return Navigator().navigate(url, factory, apply)
