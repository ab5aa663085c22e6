"""Constants and display metadata for the swap screen."""

from __future__ import annotations

from typing import Dict, Tuple

FEE_LABEL = 'Waived'
PREVIEW_LABEL = 'Preview'
INCORRECT_ORDER_LABEL = 'Incorrect Order'

EMPTY_AMOUNT = ''
ZERO_QUOTE = '0'

# Keystrokes that reset the amount to "no amount entered".
AMOUNT_RESET_INPUTS: Tuple[str, ...] = ('', '0')

# Picker rows at or above this reference value use the grouped two-decimal
# format; cheaper assets show three decimals with a dollar sign.
CATALOG_VALUE_GROUPED_THRESHOLD = 1
CATALOG_VALUE_SMALL_PLACES = 3

# Extra significant digits kept past the displayed places before rounding.
QUOTE_GUARD_DIGITS = 12

# Symbol -> glyph key. Crypto tokens use vector icons, fiat uses flags.
TOKEN_ICON_KEYS: Dict[str, str] = {
    'WBTC': 'token/btc',
    'ETH': 'token/eth',
    'USDT': 'token/usdt',
    'USDC': 'token/usdc',
    'DOGE': 'token/doge',
    'UCOIN': 'token/ucoin',
}

CURRENCY_ICON_KEYS: Dict[str, str] = {
    'USD': 'currency/usd',
    'JPY': 'currency/jpy',
    'HKD': 'currency/hkd',
    'GBP': 'currency/gbp',
    'CNY': 'currency/rmb',
    'EUR': 'currency/eur',
}

ICON_KEYS: Dict[str, str] = {**TOKEN_ICON_KEYS, **CURRENCY_ICON_KEYS}

__all__ = [
    'FEE_LABEL',
    'PREVIEW_LABEL',
    'INCORRECT_ORDER_LABEL',
    'EMPTY_AMOUNT',
    'ZERO_QUOTE',
    'AMOUNT_RESET_INPUTS',
    'CATALOG_VALUE_GROUPED_THRESHOLD',
    'CATALOG_VALUE_SMALL_PLACES',
    'QUOTE_GUARD_DIGITS',
    'TOKEN_ICON_KEYS',
    'CURRENCY_ICON_KEYS',
    'ICON_KEYS',
]
