"""Engine subpackage - rate store, selectors, price modifiers and rendering."""
from .shipping_response import ShippingResponse
from .models import (
    RateEntry,
    RateUpdate,
    ServiceIdSelector,
    ServiceIdListSelector,
    TextSelector,
    make_selector,
)
from .price_modifier import PriceModifier, apply_modifier, parse_modifier
from .schemas import CartContext
from .selector import RateQuery, SelectorResolver, parse_rate_query

__all__ = [
    'ShippingResponse',
    'RateEntry',
    'RateUpdate',
    'ServiceIdSelector',
    'ServiceIdListSelector',
    'TextSelector',
    'make_selector',
    'PriceModifier',
    'apply_modifier',
    'parse_modifier',
    'CartContext',
    'RateQuery',
    'SelectorResolver',
    'parse_rate_query',
]
