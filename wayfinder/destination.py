# wayfinder/destination.py
from abc import ABC, abstractmethod
from typing import Callable, Dict, Mapping, Optional, Protocol, Sequence, Type, TypeVar, Union

from .errors import InvalidFactoryError

D = TypeVar("D", covariant=True)


class DestinationFactory(Protocol[D]):
    def __call__(
        self, path: str, full_path: Sequence[str], parameters: Mapping[str, str]
    ) -> Optional[D]:
        ...


class DestinationType(ABC):
    """Base for caller-defined destinations that know how to build themselves from a link."""

    @classmethod
    @abstractmethod
    def from_path(
        cls, path: str, full_path: Sequence[str], parameters: Dict[str, str]
    ) -> Optional["DestinationType"]:
        raise NotImplementedError


# a plain callable, or a class exposing a from_path classmethod
FactoryLike = Union[DestinationFactory, Type[DestinationType], type]


def as_factory(
    factory: FactoryLike,
) -> Callable[[str, Sequence[str], Dict[str, str]], Optional[object]]:
    # classes (DestinationType subclasses, Enums with from_path) are adapted to their classmethod
    if isinstance(factory, type):
        if issubclass(factory, DestinationType) or callable(getattr(factory, "from_path", None)):
            return factory.from_path
        raise InvalidFactoryError(
            f"{factory.__name__} does not define a from_path classmethod"
        )
    if callable(factory):
        return factory
    raise InvalidFactoryError(f"Destination factory must be callable, got {type(factory).__name__}")
