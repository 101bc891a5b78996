# wayfinder/qt_dispatcher.py
import logging
from typing import Optional, Union

from PySide6.QtCore import QObject, QUrl, Signal, Slot

from .destination import FactoryLike
from .resolver import DestinationResolver
from .url_router import url_text

_LOGGER = logging.getLogger(__name__)


class DeepLinkDispatcher(QObject):
    """
    Resolves incoming deep links and announces the result as Qt signals.
    The host connects ``destinationsResolved`` to whatever owns its view stack.
    """

    destinationsResolved = Signal(object)  # list of destinations
    linkRejected = Signal(str, str)  # url, reason

    def __init__(self, factory: FactoryLike, resolver: Optional[DestinationResolver] = None, parent=None):
        super().__init__(parent)
        self._factory = factory
        self._resolver = resolver or DestinationResolver()

    @Slot(object, result=bool)
    def open_url(self, url: Union[str, QUrl]) -> bool:
        text = url_text(url)

        resolution = self._resolver.resolve_detailed(url, self._factory)
        if not resolution:
            _LOGGER.info("Ignoring deep link %r (%s)", text, resolution.reason.value)
            self.linkRejected.emit(str(text), resolution.reason.value)
            return False
        self.destinationsResolved.emit(resolution.destinations)
        return True
