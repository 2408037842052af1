"""
Shipping Response - Builds the reply for a custom shipping rate webhook.

Collects candidate rates for one cart, lets the caller hide, show or
adjust them by selector, and renders either the rate list or an error
in the envelope the platform expects:

    {"ok": true, "data": {"shipping_results": [...]}}
    {"ok": false, "details": "..."}
"""
import logging
from typing import Optional, Union

from pydantic import ValidationError

from ..config.settings import get_settings, Settings
from ..errors import CartPayloadError
from .models import RateEntry, RateUpdate, make_selector
from .price_modifier import apply_modifier, is_modifier_value
from .schemas import CartContext
from .selector import SelectorResolver
from . import serializer

logger = logging.getLogger(__name__)


class ShippingResponse:
    """
    Rate store for a single webhook request.

    Typical flow:
    1. add() each candidate rate (handling and flat rate fees folded in)
    2. hide() / show() / update() rates by id, id list or text query
    3. output() the envelope, or error() first to send a failure
    """

    def __init__(self, cart_details: Union[dict, CartContext, None] = None, settings: Optional[Settings] = None):
        """Validate the cart payload and start with no rates."""
        if cart_details is None or cart_details is False:
            raise CartPayloadError()

        self.settings = settings or get_settings()
        self.context = self._load_context(cart_details)
        self.resolver = SelectorResolver(self.settings.carriers)

        self._rates: list[RateEntry] = []
        self._error: Optional[str] = None

    @staticmethod
    def _load_context(cart_details) -> CartContext:
        if isinstance(cart_details, CartContext):
            return cart_details

        if not isinstance(cart_details, dict):
            raise CartPayloadError(
                f"The cart JSON payload must be an object, got {type(cart_details).__name__}"
            )

        try:
            return CartContext.model_validate(cart_details)
        except ValidationError as e:
            raise CartPayloadError(
                f"The cart JSON payload is missing shipment fees: {e}"
            ) from e

    @property
    def rates(self) -> tuple[RateEntry, ...]:
        """All rates in store order, hidden ones included."""
        return tuple(self._rates)

    @property
    def has_error(self) -> bool:
        return self._error is not None

    def add(
        self,
        service_id: int,
        price: float,
        method: str = "",
        service_name: str = "",
        add_flat_rate: bool = True,
        add_handling: bool = True
    ):
        """
        Add a custom rate.

        Ids below the custom offset are moved into the reserved range
        (5 -> 10005). Handling and flat rate fees from the cart are
        added to the price unless turned off.
        """
        offset = self.settings.custom_id_offset
        if service_id < offset:
            service_id += offset

        price = float(price)
        if add_handling:
            price += self.context.total_handling_fee
        if add_flat_rate:
            price += self.context.total_flat_rate_shipping

        self._rates.append(RateEntry(
            service_id=service_id,
            price=price,
            method=method,
            service_name=service_name,
        ))
        logger.debug("Added rate %s (%s %s) at %.2f", service_id, method, service_name, price)

    def filter(self, selector) -> Optional[list[int]]:
        """
        Resolve a selector to store indices.

        Accepts a service id, a list of service ids, a text query such
        as "fedex ground" or "all", or a Selector instance.
        """
        resolved = make_selector(selector)
        if resolved is None:
            logger.warning("Ignoring unsupported selector: %r", selector)
            return None
        return self.resolver.resolve(resolved, self._rates)

    def hide(self, selector):
        """Hide every rate matched by the selector."""
        for i in self.filter(selector) or []:
            self._rates[i].hidden = True

    def show(self, selector):
        """Show rates that were hidden."""
        for i in self.filter(selector) or []:
            self._rates[i].hidden = False

    def remove(self, selector):
        """Alias for hide()."""
        self.hide(selector)

    def update(
        self,
        selector,
        modifier: Union[str, int, float, None] = None,
        method: Optional[str] = None,
        service_name: Optional[str] = None
    ):
        """
        Update the price, method or service name of matched rates.

        The modifier is an expression such as "+2", "-10%", "*1.5" or
        "=0"; a bare number replaces the price.
        """
        self.apply_update(selector, RateUpdate(
            modifier=modifier,
            method=method,
            service_name=service_name,
        ))

    def apply_update(self, selector, changes: RateUpdate):
        """Apply a RateUpdate to every rate matched by the selector."""
        indices = self.filter(selector)
        if not indices:
            return

        for i in indices:
            rate = self._rates[i]
            if is_modifier_value(changes.modifier):
                rate.price = apply_modifier(rate.price, changes.modifier)
            if isinstance(changes.method, str):
                rate.method = changes.method
            if isinstance(changes.service_name, str):
                rate.service_name = changes.service_name
            logger.debug("Updated rate %s to %.2f", rate.service_id, rate.price)

    def reset(self):
        """Empty any existing rates and error message."""
        self._rates = []
        self._error = None

    def error(self, message: Union[str, bool, None] = None):
        """Set an error message, or clear it when called with nothing or False."""
        if message is None or message is False:
            self._error = None
        else:
            self._error = str(message)

    def output(self, output_as_string: bool = True) -> Union[str, dict]:
        """Render the rates or the error message as the webhook envelope."""
        return serializer.render(self._rates, self._error, as_string=output_as_string)

    def render(self, as_string: bool = True) -> Union[str, dict]:
        """Alias for output()."""
        return self.output(as_string)
