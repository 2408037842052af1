"""
Pydantic models for the inbound cart context and the outbound envelopes.
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ShipmentFees(BaseModel):
    """The two shipment-level fees folded into custom rates."""
    model_config = ConfigDict(extra="ignore")

    total_handling_fee: float
    total_flat_rate_shipping: float


class EmbeddedCart(BaseModel):
    model_config = ConfigDict(extra="ignore")

    shipment: ShipmentFees = Field(validation_alias=AliasChoices("fx:shipment", "shipment"))


class CartContext(BaseModel):
    """
    Read-only view of the webhook cart payload.

    Only `_embedded.fx:shipment.total_handling_fee` and
    `_embedded.fx:shipment.total_flat_rate_shipping` are read.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    embedded: EmbeddedCart = Field(validation_alias="_embedded")

    @property
    def total_handling_fee(self) -> float:
        return self.embedded.shipment.total_handling_fee

    @property
    def total_flat_rate_shipping(self) -> float:
        return self.embedded.shipment.total_flat_rate_shipping


class ShippingResult(BaseModel):
    """A visible rate in the success envelope."""
    service_id: int
    price: float
    method: str
    service_name: str


class ShippingResults(BaseModel):
    shipping_results: list[ShippingResult] = Field(default_factory=list)


class SuccessEnvelope(BaseModel):
    ok: bool = True
    data: ShippingResults


class ErrorEnvelope(BaseModel):
    ok: bool = False
    details: str
