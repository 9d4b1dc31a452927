from dataclasses import dataclass
from decimal import Decimal

ZERO_RATE = Decimal("0")


@dataclass(frozen=True)
class ConversionRequest:
    source_currency: str
    target_currency: str
    amount: Decimal


@dataclass(frozen=True)
class RateResult:
    """Normalized outcome of a single provider query."""
    provider_name: str
    rate: Decimal
    is_success: bool = True
    error_message: str | None = None

    def __post_init__(self):
        if not isinstance(self.rate, Decimal) or not self.rate.is_finite():
            raise ValueError(f"Rate must be a finite decimal, got {self.rate}")
        if self.is_success and self.error_message is not None:
            raise ValueError("A successful RateResult cannot carry an error message")
        if not self.is_success and self.rate != ZERO_RATE:
            raise ValueError("A failed RateResult must carry a zero rate")

    @classmethod
    def failure(cls, provider_name: str, error_message: str | None = None) -> "RateResult":
        return cls(
            provider_name=provider_name,
            rate=ZERO_RATE,
            is_success=False,
            error_message=error_message,
        )
