# wayfinder/url_router.py
import logging
import urllib.parse
from typing import Any, Dict, Iterable, List, Optional

from .models.route import URLRoute

_LOGGER = logging.getLogger(__name__)


def _has_control_chars(text: str) -> bool:
    return any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in text)


def url_text(url) -> Optional[str]:
    """Text of a str or QUrl-like object; None for anything else.

    QUrl is read through toEncoded(), which keeps percent-escapes. Qt has
    already lower-cased the host of a QUrl, unlike the plain string form.
    """
    if isinstance(url, str):
        return url
    to_encoded = getattr(url, "toEncoded", None)
    if callable(to_encoded):
        encoded = to_encoded()
        data = encoded.data() if hasattr(encoded, "data") else encoded
        return data.decode("utf-8") if isinstance(data, bytes) else str(data)
    to_string = getattr(url, "toString", None)
    if callable(to_string):
        return to_string()
    return None


class URLRouter:
    """Splits deep-link text into a :class:`URLRoute` and renders routes back to text.

    ``schemes`` optionally restricts which schemes :meth:`supports` accepts;
    ``None`` accepts any scheme. ``keep_encoded_slashes`` splits the path before
    percent-decoding it, so ``%2F`` stays inside one segment. The router holds no
    mutable state.
    """

    def __init__(
        self,
        schemes: Optional[Iterable[str]] = None,
        decode_plus: bool = False,
        keep_encoded_slashes: bool = False,
    ):
        self._schemes = None if schemes is None else frozenset(s.lower() for s in schemes)
        self._decode_plus = decode_plus
        self._keep_encoded_slashes = keep_encoded_slashes

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "URLRouter":
        router = settings.get("router", {})
        return cls(
            schemes=router.get("schemes"),
            decode_plus=bool(router.get("decode_plus", False)),
            keep_encoded_slashes=bool(router.get("keep_encoded_slashes", False)),
        )

    @property
    def schemes(self) -> Optional[frozenset]:
        return self._schemes

    @property
    def decode_plus(self) -> bool:
        return self._decode_plus

    @property
    def keep_encoded_slashes(self) -> bool:
        return self._keep_encoded_slashes

    def supports(self, scheme: str) -> bool:
        return self._schemes is None or scheme.lower() in self._schemes

    def parse(self, text) -> Optional[URLRoute]:
        """Return the decomposed route, or None if ``text`` is not a well-formed URL."""
        if not isinstance(text, str):
            text = url_text(text)
            if text is None:
                return None
        text = text.strip()
        if not text or _has_control_chars(text):
            _LOGGER.debug("Rejecting empty or control-character URL %r", text)
            return None
        try:
            parts = urllib.parse.urlsplit(text)
            parts.port  # raises ValueError for a non-numeric or out-of-range port
        except ValueError as exc:
            _LOGGER.debug("Cannot split URL %r: %s", text, exc)
            return None
        if not parts.scheme:
            _LOGGER.debug("URL %r has no scheme", text)
            return None

        host = self._host_from_netloc(parts.netloc)
        segments: List[str] = []
        if host:
            segments.append(host)
        segments.extend(self._path_segments(parts.path))

        return URLRoute(
            scheme=parts.scheme,
            host=host or None,
            segments=tuple(segments),
            query=self._parse_query(parts.query),
        )

    def to_text(self, route: URLRoute) -> str:
        host = urllib.parse.quote(route.host, safe="") if route.host else ""
        text = f"{route.scheme}://{host}"
        if route.path_segments:
            text += "/" + "/".join(urllib.parse.quote(s, safe="") for s in route.path_segments)
        if route.query:
            text += "?" + urllib.parse.urlencode(route.query, quote_via=urllib.parse.quote)
        return text

    def _path_segments(self, path: str) -> List[str]:
        # empty tokens come from leading, trailing or repeated slashes
        if self._keep_encoded_slashes:
            return [urllib.parse.unquote(token) for token in path.split("/") if token]
        return [token for token in urllib.parse.unquote(path).split("/") if token]

    def _host_from_netloc(self, netloc: str) -> str:
        hostinfo = netloc.rpartition("@")[2]
        if hostinfo.startswith("["):
            # urlsplit has already rejected unbalanced brackets
            return hostinfo[1:hostinfo.index("]")]
        return self._unquote(hostinfo.partition(":")[0])

    def _parse_query(self, query: str) -> Dict[str, str]:
        parameters: Dict[str, str] = {}
        if not query:
            return parameters
        for item in query.split("&"):
            name, sep, value = item.partition("=")
            if not sep:
                # `?flag` has no value and is dropped, `?flag=` keeps ""
                continue
            parameters[self._unquote(name)] = self._unquote(value)
        return parameters

    def _unquote(self, text: str) -> str:
        if self._decode_plus:
            return urllib.parse.unquote_plus(text)
        return urllib.parse.unquote(text)
