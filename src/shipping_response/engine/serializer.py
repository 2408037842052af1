"""
Response Serializer - Renders rates or a pending error into the webhook envelope.
"""
from typing import Optional, Sequence, Union

from .models import RateEntry
from .schemas import ErrorEnvelope, ShippingResult, ShippingResults, SuccessEnvelope


def build_envelope(
    rates: Sequence[RateEntry],
    error: Optional[str] = None
) -> Union[SuccessEnvelope, ErrorEnvelope]:
    """
    Build the response envelope.

    A pending error wins over any rates. Hidden rates are left out but
    keep their store order otherwise.
    """
    if error is not None:
        return ErrorEnvelope(details=error)

    visible = [
        ShippingResult(**rate.to_result())
        for rate in rates
        if not rate.hidden
    ]
    return SuccessEnvelope(data=ShippingResults(shipping_results=visible))


def render(
    rates: Sequence[RateEntry],
    error: Optional[str] = None,
    as_string: bool = True
) -> Union[str, dict]:
    """Render the envelope as compact JSON text, or as a plain dict."""
    envelope = build_envelope(rates, error)
    if as_string:
        return envelope.model_dump_json()
    return envelope.model_dump()
