"""Keystroke filter for the source amount field."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Optional, Pattern

from ...config import settings
from .constants import AMOUNT_RESET_INPUTS, EMPTY_AMOUNT

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def amount_pattern(fraction_digits: int) -> Pattern[str]:
    """Digits, at most one decimal point, then up to ``fraction_digits`` digits."""
    return re.compile(rf"[0-9]*\.?[0-9]{{0,{fraction_digits}}}")


def is_well_formed(text: str, fraction_digits: Optional[int] = None) -> bool:
    digits = settings.amount_fraction_digits if fraction_digits is None else fraction_digits
    return amount_pattern(digits).fullmatch(text) is not None


def sanitize(
    raw_input: str,
    previous_accepted: str,
    *,
    fraction_digits: Optional[int] = None,
) -> str:
    """Return the next accepted amount text for a keystroke.

    An empty field or a lone ``"0"`` clears the amount. A leading ``"."`` is
    completed to ``"0."``. Anything else that is not a plain decimal with at
    most ``fraction_digits`` fractional digits is dropped, and
    ``previous_accepted`` is kept as is. Nothing is rounded here.
    """
    if raw_input in AMOUNT_RESET_INPUTS:
        return EMPTY_AMOUNT

    candidate = f"0{raw_input}" if raw_input.startswith(".") else raw_input
    if is_well_formed(candidate, fraction_digits):
        return candidate

    logger.debug("Rejected amount input %r; keeping %r", raw_input, previous_accepted)
    return previous_accepted
