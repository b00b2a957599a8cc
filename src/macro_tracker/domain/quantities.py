"""Models for quantity detection results."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ExtractedQuantity:
    """A food item paired with the quantity text found for it."""

    item: str
    quantity: str
    rule: str


@dataclass(frozen=True)
class QuantityAnalysis:
    """Whether a description states explicit amounts."""

    has_explicit_quantities: bool
    extracted_quantities: list[ExtractedQuantity] = field(default_factory=list)
