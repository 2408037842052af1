"""
Selector Resolver - Maps selectors to the indices of matching rate entries.

Used by the shipping response mutators (hide/show/update) to pick
which rates a change applies to.
"""
import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from .models import (
    RateEntry,
    Selector,
    ServiceIdListSelector,
    ServiceIdSelector,
    TextSelector,
)

logger = logging.getLogger(__name__)

MATCH_ALL = "all"


@dataclass(frozen=True)
class RateQuery:
    """Parsed free-text selector."""
    carrier: Optional[str] = None
    remainder: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.carrier is None and self.remainder is None


def build_query_pattern(carriers: Sequence[str]) -> re.Pattern:
    """
    Compile the free-text query pattern for a carrier set.

    Longer carrier names are tried first so "usps" is not read as "ups".
    A carrier only counts as a whole token; otherwise the text falls
    through to the remainder.
    """
    names = sorted({c.strip().lower() for c in carriers if c.strip()}, key=len, reverse=True)
    if names:
        carrier_group = "(?:(" + "|".join(re.escape(n) for n in names) + r")\b)?"
    else:
        carrier_group = "()?"
    return re.compile(carrier_group + r"\s?([\w\s]+)?", re.IGNORECASE)


def parse_rate_query(query: str, pattern: re.Pattern) -> RateQuery:
    """
    Split a free-text selector into carrier and remainder tokens.

    "FedEx Ground" -> carrier="fedex", remainder="ground"
    "Priority"     -> carrier=None,    remainder="priority"
    """
    match = pattern.match(query)
    if not match:
        return RateQuery()

    carrier = match.group(1) or None
    remainder = (match.group(2) or "").strip() or None

    return RateQuery(
        carrier=carrier.casefold() if carrier else None,
        remainder=remainder.casefold() if remainder else None,
    )


def query_matches(query: RateQuery, text: str) -> bool:
    """Both captured tokens must appear in the case-folded rate text."""
    if query.carrier and query.carrier not in text:
        return False
    if query.remainder and query.remainder not in text:
        return False
    return True


class SelectorResolver:
    """
    Resolves selectors against an ordered list of rate entries.

    Returns store indices, which stay valid for the life of the store
    since entries are never removed.
    """

    def __init__(self, carriers: Sequence[str]):
        self.carriers = tuple(carriers)
        self.pattern = build_query_pattern(self.carriers)

    def resolve(self, selector: Selector, rates: Sequence[RateEntry]) -> Optional[list[int]]:
        """
        Find the indices of rates matched by a selector.

        An empty list means nothing matched. None means the free-text
        query could not be parsed into any token.
        """
        if isinstance(selector, ServiceIdSelector):
            return self._by_service_id(selector.service_id, rates)

        if isinstance(selector, ServiceIdListSelector):
            return self._by_service_ids(selector.service_ids, rates)

        if isinstance(selector, TextSelector):
            return self._by_text(selector.query, rates)

        logger.warning("Unsupported selector type: %r", selector)
        return None

    def _by_service_id(self, service_id: int, rates: Sequence[RateEntry]) -> list[int]:
        for i, rate in enumerate(rates):
            if rate.service_id == service_id:
                return [i]
        return []

    def _by_service_ids(self, service_ids: Sequence[int], rates: Sequence[RateEntry]) -> list[int]:
        indices = []
        for code in service_ids:
            for i, rate in enumerate(rates):
                if rate.service_id == code:
                    indices.append(i)
        return indices

    def _by_text(self, text: str, rates: Sequence[RateEntry]) -> Optional[list[int]]:
        if text.lower() == MATCH_ALL:
            return list(range(len(rates)))

        query = parse_rate_query(text, self.pattern)
        if query.is_empty:
            logger.debug("Selector %r produced no carrier or remainder token", text)
            return None

        return [i for i, rate in enumerate(rates) if query_matches(query, rate.search_text)]
