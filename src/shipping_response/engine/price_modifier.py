"""
Price Modifier - Parses and applies compact price change expressions.

Expression grammar: optional operator (+ - * / =), a magnitude, and an
optional trailing "%". Examples: "+2", "-1.50", "*1.1", "10%", "=0", "5".
"""
import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

logger = logging.getLogger(__name__)

MODIFIER_PATTERN = re.compile(r"([+\-=*/])?(\d+(?:\.\d+)?)(%)?")

DEFAULT_OPERATOR = "="
DEFAULT_PERCENT_OPERATOR = "+"


@dataclass(frozen=True)
class PriceModifier:
    """A parsed price modifier expression."""
    operator: str
    magnitude: float
    percent: bool = False

    def apply(self, price: float) -> float:
        """
        Apply the modifier to a price.

        Percentages are taken of the price being modified. The result
        never goes below zero.
        """
        price = float(price)
        amount = price * (self.magnitude / 100) if self.percent else self.magnitude

        if self.operator == "+":
            new_price = price + amount
        elif self.operator == "-":
            new_price = price - amount
        elif self.operator == "*":
            new_price = price * amount
        elif self.operator == "/":
            if amount == 0:
                logger.warning("Ignoring price modifier that divides by zero")
                return price
            new_price = price / amount
        else:
            new_price = amount

        return max(0.0, new_price)


def is_modifier_value(value) -> bool:
    """True for non-empty strings and plain numbers."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and value != ""


def _as_expression(value: Union[str, int, float]) -> str:
    if isinstance(value, float):
        return format(value, "f")
    return str(value)


def parse_modifier(expression: Union[str, int, float]) -> Optional[PriceModifier]:
    """
    Parse a modifier expression.

    Returns None when the expression is not a modifier value or has no
    numeric magnitude.
    """
    if not is_modifier_value(expression):
        return None

    match = MODIFIER_PATTERN.search(_as_expression(expression))
    if not match:
        return None

    operator, magnitude, percent = match.groups()
    return PriceModifier(
        operator=operator or (DEFAULT_PERCENT_OPERATOR if percent else DEFAULT_OPERATOR),
        magnitude=float(magnitude),
        percent=bool(percent),
    )


def apply_modifier(price: float, expression: Union[str, int, float, None]) -> float:
    """Parse an expression and apply it to a price, or return the price unchanged."""
    modifier = parse_modifier(expression)
    if modifier is None:
        logger.warning("Ignoring unparseable price modifier: %r", expression)
        return price
    return modifier.apply(price)
