"""
Swap Errors

Error types raised by the quote engine, the selection state machine and the
asset catalog.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(str, Enum):
    """Categories of swap errors."""

    DEGENERATE_RATE = "degenerate_rate"   # Reference value of zero on the destination side
    INVALID_TRANSITION = "invalid_transition"
    UNKNOWN_ASSET = "unknown_asset"
    CATALOG = "catalog"                   # Catalog file missing or malformed


class SwapQuoteError(Exception):
    """Base class for swap quote errors."""

    category: ErrorCategory = ErrorCategory.CATALOG

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "message": self.message,
            "details": self.details,
        }


class DegenerateRateError(SwapQuoteError):
    """Raised when a rate cannot be computed because the divisor is zero."""

    category = ErrorCategory.DEGENERATE_RATE

    def __init__(self, source_symbol: str, destination_symbol: str):
        super().__init__(
            f"Rate unavailable for {source_symbol} -> {destination_symbol}: "
            f"{destination_symbol} has a zero reference value",
            details={"source": source_symbol, "destination": destination_symbol},
        )
        self.source_symbol = source_symbol
        self.destination_symbol = destination_symbol


class InvalidTransitionError(SwapQuoteError):
    """Raised when a selection operation is called from the wrong phase."""

    category = ErrorCategory.INVALID_TRANSITION

    def __init__(self, operation: str, phase: str, message: Optional[str] = None):
        super().__init__(
            message or f"Cannot {operation} while {phase}",
            details={"operation": operation, "phase": phase},
        )
        self.operation = operation
        self.phase = phase


class UnknownAssetError(SwapQuoteError):
    """Raised when the catalog has no asset for a symbol."""

    category = ErrorCategory.UNKNOWN_ASSET

    def __init__(self, symbol: str):
        super().__init__(f"Unknown asset: {symbol}", details={"symbol": symbol})
        self.symbol = symbol


class CatalogError(SwapQuoteError):
    """Raised when the catalog source cannot be read or parsed."""

    category = ErrorCategory.CATALOG
