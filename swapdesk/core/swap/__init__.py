"""
Swap Quote Module

Amount sanitizing, quote computation and asset selection for the swap
screen.
"""

from .catalog import AssetCatalog, PickerEntry, icon_key
from .errors import (
    CatalogError,
    DegenerateRateError,
    ErrorCategory,
    InvalidTransitionError,
    SwapQuoteError,
    UnknownAssetError,
)
from .models import Asset, PickerState, SelectionPhase, SelectionTarget, SwapQuote, SwapState
from .quote import (
    balance_label,
    compute_destination_amount,
    compute_exchange_rate_label,
    format_catalog_value,
    is_submission_enabled,
    parse_amount,
    quote_state,
    submission_label,
)
from .sanitizer import is_well_formed, sanitize
from .selection import SelectionStateMachine
from .session import SwapSession

__all__ = [
    # Session
    "SwapSession",
    # State Machine
    "SelectionStateMachine",
    # Models
    "Asset",
    "SwapState",
    "SwapQuote",
    "SelectionTarget",
    "SelectionPhase",
    "PickerState",
    # Catalog
    "AssetCatalog",
    "PickerEntry",
    "icon_key",
    # Quote engine
    "compute_destination_amount",
    "compute_exchange_rate_label",
    "is_submission_enabled",
    "parse_amount",
    "quote_state",
    "submission_label",
    "balance_label",
    "format_catalog_value",
    # Sanitizer
    "sanitize",
    "is_well_formed",
    # Errors
    "SwapQuoteError",
    "DegenerateRateError",
    "InvalidTransitionError",
    "UnknownAssetError",
    "CatalogError",
    "ErrorCategory",
]
