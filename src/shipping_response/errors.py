"""
Typed exceptions for the shipping response helper.

Only fatal preconditions raise. Selector and modifier mismatches are
absorbed by the engine and logged instead.
"""


class ShippingResponseError(Exception):
    """Base exception for shipping response errors."""


class CartPayloadError(ShippingResponseError):
    """The inbound cart payload is missing or does not carry the shipment fees."""

    def __init__(self, message: str = "The cart JSON payload is required to build a shipping response") -> None:
        super().__init__(message)
