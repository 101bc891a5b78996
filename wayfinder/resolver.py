# wayfinder/resolver.py
"""Turns a deep link into an ordered list of caller-defined destinations.

Each segment of the link (the host first, then every non-empty path token) is
offered to the destination factory together with the whole segment tuple and
the query parameters. Segments the factory does not recognise are skipped.
A link that yields no destination at all is reported as unresolved.
"""

import logging
from typing import List, Optional

from .destination import FactoryLike, as_factory
from .models.resolution import Resolution, Resolved, Unresolved, UnresolvedReason
from .url_router import URLRouter

_LOGGER = logging.getLogger(__name__)


class DestinationResolver:
    def __init__(self, router: Optional[URLRouter] = None):
        self._router = router or URLRouter()

    @property
    def router(self) -> URLRouter:
        return self._router

    def resolve(self, url, factory: FactoryLike) -> Optional[List]:
        """Return the destinations for ``url``, or None when nothing resolves.

        A garbled link and a well-formed link with no known segment both give
        None; use :meth:`resolve_detailed` to tell them apart.
        """
        return self.resolve_detailed(url, factory).destinations

    def resolve_detailed(self, url, factory: FactoryLike) -> Resolution:
        build = as_factory(factory)

        route = self._router.parse(url)
        if route is None:
            _LOGGER.debug("Unparseable link %r", url)
            return Unresolved(UnresolvedReason.UNPARSEABLE, url)
        if not self._router.supports(route.scheme):
            _LOGGER.debug("Scheme %r is not accepted for %r", route.scheme, url)
            return Unresolved(UnresolvedReason.UNSUPPORTED_SCHEME, url, route)
        if not route.segments:
            _LOGGER.debug("Link %r has neither host nor path", url)
            return Unresolved(UnresolvedReason.NO_SEGMENTS, url, route)

        destinations = []
        for segment in route.segments:
            destination = build(segment, route.segments, route.query)
            if destination is None:
                _LOGGER.debug("No destination for segment %r of %r", segment, url)
                continue
            destinations.append(destination)

        if not destinations:
            return Unresolved(UnresolvedReason.NO_DESTINATIONS, url, route)
        return Resolved(destinations, route)


_default_resolver = DestinationResolver()


def resolve(url, factory: FactoryLike) -> Optional[List]:
    return _default_resolver.resolve(url, factory)


def resolve_detailed(url, factory: FactoryLike) -> Resolution:
    return _default_resolver.resolve_detailed(url, factory)
