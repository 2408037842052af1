"""
Shipping Response Package

Response builder for custom shipping rate webhooks.
Collects candidate rates for a cart, filters and adjusts them by selector,
and renders the JSON envelope the calling platform expects.
"""
from .engine import ShippingResponse
from .errors import CartPayloadError, ShippingResponseError

__version__ = "1.0.0"

__all__ = ['ShippingResponse', 'CartPayloadError', 'ShippingResponseError']
