"""
Data models for the shipping response engine.

Uses dataclasses for rate entries, update parameters and selectors.
"""
from dataclasses import dataclass
from typing import Optional, Union


@dataclass
class RateEntry:
    """A single candidate shipping rate."""
    service_id: int
    price: float
    method: str = ""
    service_name: str = ""
    hidden: bool = False

    @property
    def search_text(self) -> str:
        """Case-folded text used by free-text selectors."""
        return f"{self.method} {self.service_name}".casefold()

    def to_result(self) -> dict:
        """Convert to the shipping_results item shape."""
        return {
            "service_id": self.service_id,
            "price": self.price,
            "method": self.method,
            "service_name": self.service_name,
        }


@dataclass(frozen=True)
class RateUpdate:
    """
    Changes to apply to every rate matched by a selector.

    A field left as None is not touched.
    """
    modifier: Optional[Union[str, int, float]] = None
    method: Optional[str] = None
    service_name: Optional[str] = None


@dataclass(frozen=True)
class ServiceIdSelector:
    """Matches the first rate with this exact service id."""
    service_id: int


@dataclass(frozen=True)
class ServiceIdListSelector:
    """Matches every rate whose service id is in the list."""
    service_ids: tuple[int, ...]


@dataclass(frozen=True)
class TextSelector:
    """Free-text carrier / method query, or "all"."""
    query: str


Selector = Union[ServiceIdSelector, ServiceIdListSelector, TextSelector]


def make_selector(value) -> Optional[Selector]:
    """
    Build a Selector from a raw caller value.

    Accepts an int, a str, a list/tuple of ints or an existing Selector.
    Returns None for anything else.
    """
    if isinstance(value, (ServiceIdSelector, ServiceIdListSelector, TextSelector)):
        return value

    # bool is an int subclass but never a service id
    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        return ServiceIdSelector(service_id=value)

    if isinstance(value, str):
        return TextSelector(query=value)

    if isinstance(value, (list, tuple)):
        if all(isinstance(v, int) and not isinstance(v, bool) for v in value):
            return ServiceIdListSelector(service_ids=tuple(value))

    return None
