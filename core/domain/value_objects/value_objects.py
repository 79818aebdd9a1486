"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID, uuid4

from ..exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value with currency.

    Amounts are kept in major currency units (dollars, not cents).

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal
    currency: str = "CAD"

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        # Validate currency code (3 letters)
        if not isinstance(self.currency, str) or len(self.currency) != 3:
            raise ValueError(
                f"Currency must be 3-letter ISO code, got: {self.currency}"
            )
        object.__setattr__(self, 'currency', self.currency.upper())

    @classmethod
    def zero(cls, currency: str = "CAD") -> "Money":
        return cls(amount=Decimal("0"), currency=currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def __add__(self, other: 'Money') -> 'Money':
        """Add two Money objects (must have same currency)."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot add different currencies: {self.currency} vs {other.currency}"
            )
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __mul__(self, quantity: int) -> 'Money':
        """Multiply by an integer quantity (line totals)."""
        return Money(amount=self.amount * quantity, currency=self.currency)

    def to_minor_units(self) -> int:
        """
        Convert to the smallest currency unit (cents).

        Returns:
            Integer amount, e.g. 9.99 -> 999
        """
        return int((self.amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class ExecutionID:
    """Unique identifier for tracing one unit of work through the logs."""

    value: UUID

    @classmethod
    def generate(cls) -> "ExecutionID":
        """Generate a new ExecutionID."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)


@dataclass(frozen=True)
class EntityID:
    """
    Identifier of a stored record (order, order item, product, user).

    Stored as the canonical string form of a UUID.
    """
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValidationError("Identifier cannot be empty")
        try:
            canonical = str(UUID(str(self.value)))
        except (ValueError, AttributeError, TypeError):
            raise ValidationError(f"Invalid identifier: {self.value}")
        object.__setattr__(self, 'value', canonical)

    @classmethod
    def generate(cls) -> "EntityID":
        return cls(value=str(uuid4()))

    def __str__(self) -> str:
        return self.value
