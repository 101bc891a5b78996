# wayfinder/models/route.py
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

@dataclass(frozen=True)
class URLRoute:
    scheme: str                   # lower-cased, e.g. 'myapp'
    host: Optional[str] = None    # first path segment when present, case preserved
    segments: Tuple[str, ...] = ()  # host first, then non-empty path tokens
    query: Dict[str, str] = field(default_factory=dict)

    @property
    def path_segments(self) -> Tuple[str, ...]:
        """Segments that came from the path, without the host."""
        if self.host:
            return self.segments[1:]
        return self.segments
