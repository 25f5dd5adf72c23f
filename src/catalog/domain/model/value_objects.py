"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
import secrets
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import PurePosixPath, PureWindowsPath

from catalog.domain.exceptions import InvalidField, InvalidImage

_OBJECT_ID = re.compile(r"^[0-9a-f]{24}$")

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png")


def new_object_id() -> str:
    """Return a fresh 24-hex-digit identifier (products and comments)."""
    return secrets.token_hex(12)


def is_object_id(value: object) -> bool:
    return isinstance(value, str) and _OBJECT_ID.match(value) is not None


@dataclass(frozen=True)
class Price:
    """Non-negative product price with at most two decimal places.

    Uses Decimal so that prices survive a JSON round trip unchanged, and
    the two-decimal display is always the exact stored amount.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidField(
                f"Price amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite() or self.amount < Decimal("0"):
            raise InvalidField(f"Price cannot be negative, got {self.amount}")
        if (self.amount * 100) % 1 != 0:
            raise InvalidField(f"Price has more than two decimal places: {self.amount}")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Price:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise InvalidField(f"Invalid price: {amount!r}")
        try:
            return Price(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidField(f"Invalid price: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """Units in stock. Zero is a valid quantity for a catalog entry."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise InvalidField(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise InvalidField("Quantity cannot be negative")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def of(value: str | int) -> Quantity:
        if isinstance(value, str):
            try:
                value = int(value.strip())
            except ValueError as exc:
                raise InvalidField(f"Invalid quantity: {value!r}") from exc
        return Quantity(value)


@dataclass(frozen=True)
class ImageUpload:
    """A binary attachment offered for a product's image.

    Only the base name of the client filename is kept, so an upload can
    never escape its product's namespace.
    """

    filename: str
    content: bytes

    def __post_init__(self) -> None:
        name = PureWindowsPath(PurePosixPath(self.filename or "").name).name
        if not name.lower().endswith(IMAGE_EXTENSIONS):
            raise InvalidImage("Please upload an image (.jpg, .jpeg or .png)")
        if not self.content:
            raise InvalidImage(f"Image '{name}' is empty")
        object.__setattr__(self, "filename", name)


@dataclass(frozen=True)
class ObjectLocator:
    """Address of one stored object: ``<namespace>/<filename>``."""

    namespace: str
    filename: str

    @property
    def key(self) -> str:
        return f"{self.namespace}/{self.filename}"

    def __str__(self) -> str:
        return self.key
