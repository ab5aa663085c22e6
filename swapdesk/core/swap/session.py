"""SwapSession wires the selection state machine to the quote engine."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ...config import settings
from ...logging_config import bind_swap_context, ensure_logging
from .catalog import AssetCatalog, PickerEntry
from .constants import EMPTY_AMOUNT, FEE_LABEL
from .models import Asset, PickerState, SelectionTarget, SwapQuote, SwapState
from .quote import balance_label, quote_state
from .sanitizer import sanitize
from .selection import Clock, SelectionStateMachine


class SwapSession:
    """Operations and read accessors exposed to the swap screen.

    One session lives as long as the screen. The quote is derived from the
    current state and memoized against that exact state object; every
    mutation produces a new ``SwapState``, so a stale quote is never served.
    """

    def __init__(
        self,
        catalog: AssetCatalog,
        *,
        source_symbol: Optional[str] = None,
        destination_symbol: Optional[str] = None,
        source_amount_text: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._catalog = catalog
        self._machine = SelectionStateMachine(
            catalog.get(source_symbol or settings.default_source_symbol),
            catalog.get(destination_symbol or settings.default_destination_symbol),
            settings.default_source_amount if source_amount_text is None else source_amount_text,
            logger=self._logger,
            clock=clock,
        )
        self._quoted: Optional[Tuple[SwapState, SwapQuote]] = None
        self._bind_log_context()

    @classmethod
    def from_settings(cls, *, clock: Optional[Clock] = None) -> "SwapSession":
        """Entry point for a screen: configures logging and loads the catalog."""
        ensure_logging()
        return cls(AssetCatalog.load(), clock=clock)

    def _bind_log_context(self) -> None:
        state = self._machine.state
        bind_swap_context(
            f"{state.source_asset.symbol}->{state.destination_asset.symbol}",
            self._machine.picker.describe(),
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def catalog(self) -> AssetCatalog:
        return self._catalog

    @property
    def state(self) -> SwapState:
        return self._machine.state

    @property
    def picker(self) -> PickerState:
        return self._machine.picker

    @property
    def quote(self) -> SwapQuote:
        state = self._machine.state
        if self._quoted is None or self._quoted[0] is not state:
            self._quoted = (state, quote_state(state))
        return self._quoted[1]

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def sanitize_and_set_amount(self, text: str) -> str:
        """Apply one keystroke to the amount field and return the accepted text."""
        accepted = sanitize(text, self._machine.amount_text)
        if accepted != self._machine.amount_text:
            self._machine.set_amount_text(accepted)
        return accepted

    def set_max(self) -> SwapState:
        return self._machine.set_max_amount()

    def flip(self) -> SwapState:
        # The quote has to come from the pre-flip pair.
        destination_amount = self.destination_amount
        if destination_amount is None:
            self._logger.warning("Flipping a pair without a rate; clearing the amount")
            destination_amount = EMPTY_AMOUNT
        state = self._machine.flip(destination_amount)
        self._bind_log_context()
        return state

    def open_picker(self, side: SelectionTarget) -> bool:
        opened = self._machine.open_picker(SelectionTarget(side))
        self._bind_log_context()
        return opened

    def confirm_selection(self, asset: Asset) -> SwapState:
        state = self._machine.confirm_selection(asset)
        self._bind_log_context()
        return state

    def confirm_symbol(self, symbol: str) -> SwapState:
        return self.confirm_selection(self._catalog.get(symbol))

    def cancel_picker(self) -> None:
        self._machine.cancel_picker()
        self._bind_log_context()

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def destination_amount(self) -> Optional[str]:
        return self.quote.destination_amount

    @property
    def exchange_rate_label(self) -> Optional[str]:
        return self.quote.exchange_rate_label

    @property
    def is_submission_enabled(self) -> bool:
        return self.quote.submission_enabled

    @property
    def submission_label(self) -> str:
        return self.quote.submission_label

    @property
    def source_balance_label(self) -> str:
        return balance_label(self._machine.source_asset)

    @property
    def destination_balance_label(self) -> str:
        return balance_label(self._machine.destination_asset)

    @property
    def fee_label(self) -> str:
        return FEE_LABEL

    def picker_entries(self) -> List[PickerEntry]:
        return self._catalog.picker_entries()
