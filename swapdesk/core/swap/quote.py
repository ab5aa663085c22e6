"""Pure quote computations for a swap pair.

Everything here is derived from the catalog strings on every call; nothing
is cached, so a flip or a new selection can never leave a stale quote behind.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Optional

from ...config import settings
from .constants import (
    CATALOG_VALUE_GROUPED_THRESHOLD,
    CATALOG_VALUE_SMALL_PLACES,
    INCORRECT_ORDER_LABEL,
    PREVIEW_LABEL,
    QUOTE_GUARD_DIGITS,
    ZERO_QUOTE,
)
from .errors import DegenerateRateError
from .models import Asset, SwapQuote, SwapState

logger = logging.getLogger(__name__)


def parse_amount(text: Optional[str]) -> Optional[Decimal]:
    """Parse amount text, returning None for empty or non-numeric input."""
    if text is None:
        return None
    cleaned = text.strip()
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def _quantize(value: Decimal, places: int) -> Decimal:
    # Context precision must cover every integer digit plus the fraction.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _convert(amount: Decimal, numerator: Decimal, divisor: Decimal, places: int) -> Decimal:
    """Return ``amount * numerator / divisor`` rounded half-up to ``places``.

    The product is exact and the quotient carries guard digits past
    ``places``, whatever the magnitude of the inputs.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + len(numerator.as_tuple().digits))
        product = amount * numerator
        ctx.prec = max(ctx.prec, product.adjusted() - divisor.adjusted() + places + QUOTE_GUARD_DIGITS)
        return _quantize(product / divisor, places)


def _ensure_rate_defined(source_asset: Asset, destination_asset: Asset) -> Decimal:
    divisor = destination_asset.reference_value_decimal
    if divisor == 0:
        raise DegenerateRateError(source_asset.symbol, destination_asset.symbol)
    return divisor


def compute_destination_amount(
    source_amount_text: str,
    source_asset: Asset,
    destination_asset: Asset,
    *,
    decimal_places: Optional[int] = None,
) -> str:
    """Convert a source amount into the destination asset.

    Returns ``"0"`` for an empty, zero or non-numeric amount. Otherwise the
    result is a fixed-point string with ``decimal_places`` fractional digits
    (default from settings), rounded half-up.

    Raises:
        DegenerateRateError: If the destination reference value is zero.
    """
    amount = parse_amount(source_amount_text)
    if amount is None or amount == 0:
        return ZERO_QUOTE

    divisor = _ensure_rate_defined(source_asset, destination_asset)
    places = settings.quote_decimal_places if decimal_places is None else decimal_places

    converted = _convert(amount, source_asset.reference_value_decimal, divisor, places)
    return format(converted, "f")


def compute_exchange_rate_label(
    source_asset: Asset,
    destination_asset: Asset,
    *,
    decimal_places: Optional[int] = None,
) -> str:
    """Format the unit rate, e.g. ``"1 WBTC: 110,554.89 USD"``.

    Raises:
        DegenerateRateError: If the destination reference value is zero.
    """
    divisor = _ensure_rate_defined(source_asset, destination_asset)
    places = settings.rate_decimal_places if decimal_places is None else decimal_places

    rate = _convert(Decimal(1), source_asset.reference_value_decimal, divisor, places)
    return f"1 {source_asset.display_name}: {rate:,f} {destination_asset.display_name}"


def is_submission_enabled(source_amount_text: str, source_asset: Asset) -> bool:
    """True iff the amount is positive and does not exceed the source balance."""
    amount = parse_amount(source_amount_text)
    if amount is None:
        return False
    return Decimal(0) < amount <= source_asset.balance_decimal


def submission_label(enabled: bool) -> str:
    return PREVIEW_LABEL if enabled else INCORRECT_ORDER_LABEL


def balance_label(asset: Asset) -> str:
    return f"Balance: {asset.balance}"


def format_catalog_value(reference_value: str) -> str:
    """Value column of the asset picker."""
    value = Decimal(reference_value)
    if value >= CATALOG_VALUE_GROUPED_THRESHOLD:
        return f"≈ {_quantize(value, 2):,f}"
    return f"≈ $ {_quantize(value, CATALOG_VALUE_SMALL_PLACES):f}"


def quote_state(state: SwapState) -> SwapQuote:
    """Derive every quote output for a state.

    A degenerate pair yields ``None`` for the amount and the rate label
    instead of raising.
    """
    enabled = is_submission_enabled(state.source_amount_text, state.source_asset)
    try:
        destination_amount: Optional[str] = compute_destination_amount(
            state.source_amount_text, state.source_asset, state.destination_asset
        )
        rate_label: Optional[str] = compute_exchange_rate_label(
            state.source_asset, state.destination_asset
        )
    except DegenerateRateError as exc:
        logger.warning(exc.message)
        # An empty amount still quotes to zero without touching the rate.
        amount = parse_amount(state.source_amount_text)
        destination_amount = ZERO_QUOTE if amount is None or amount == 0 else None
        rate_label = None

    return SwapQuote(
        destination_amount=destination_amount,
        exchange_rate_label=rate_label,
        submission_enabled=enabled,
        submission_label=submission_label(enabled),
    )
