"""
Selection State Machine

Owns the swap pair, the amount text and the asset picker phase.

Phases:
    IDLE                     resting state, all edits allowed
    PICKING_ASSET(target)    picker open for the source or destination side

The picker close animation is modelled as a deadline only. Opening the
picker again before it passes is ignored rather than queued.
"""

import logging
import time
from dataclasses import replace
from typing import Callable, Optional

from ...config import settings
from .errors import InvalidTransitionError
from .models import Asset, PickerState, SelectionPhase, SelectionTarget, SwapState


Clock = Callable[[], float]


class SelectionStateMachine:
    """Manages which assets are being swapped and the picker lifecycle."""

    def __init__(
        self,
        source_asset: Asset,
        destination_asset: Asset,
        source_amount_text: str = "",
        *,
        logger: Optional[logging.Logger] = None,
        clock: Optional[Clock] = None,
        close_duration_seconds: Optional[float] = None,
    ):
        """
        Args:
            source_asset: Initial asset to send
            destination_asset: Initial asset to receive
            source_amount_text: Initial raw amount text
            logger: Optional logger
            clock: Monotonic time source, overridable in tests
            close_duration_seconds: Picker close animation length
        """
        self._state = SwapState(
            source_asset=source_asset,
            destination_asset=destination_asset,
            source_amount_text=source_amount_text,
        )
        self._picker = PickerState.idle()
        self.logger = logger or logging.getLogger(__name__)
        self._clock: Clock = clock or time.monotonic
        self._close_duration = (
            settings.picker_close_duration_seconds
            if close_duration_seconds is None
            else close_duration_seconds
        )
        self._closing_until = 0.0

    @property
    def state(self) -> SwapState:
        return self._state

    @property
    def picker(self) -> PickerState:
        return self._picker

    @property
    def phase(self) -> SelectionPhase:
        return self._picker.phase

    @property
    def target(self) -> Optional[SelectionTarget]:
        return self._picker.target

    @property
    def source_asset(self) -> Asset:
        return self._state.source_asset

    @property
    def destination_asset(self) -> Asset:
        return self._state.destination_asset

    @property
    def amount_text(self) -> str:
        return self._state.source_amount_text

    @property
    def is_closing(self) -> bool:
        """Whether a picker close animation is still running."""
        return self._clock() < self._closing_until

    def can_open_picker(self) -> bool:
        return self._picker.is_idle and not self.is_closing

    def _require_idle(self, operation: str) -> None:
        if not self._picker.is_idle:
            raise InvalidTransitionError(operation, self._picker.describe())

    def _move_to(self, picker: PickerState) -> None:
        previous = self._picker
        self._picker = picker
        self.logger.info(f"Picker: {previous.describe()} -> {picker.describe()}")

    def _close(self) -> None:
        self._move_to(PickerState.idle())
        self._closing_until = self._clock() + self._close_duration

    def set_amount_text(self, text: str) -> SwapState:
        """Store already-sanitized amount text."""
        self._state = replace(self._state, source_amount_text=text)
        return self._state

    def open_picker(self, target: SelectionTarget) -> bool:
        """Open the asset picker for one side.

        Returns:
            False if the request was dropped because the previous picker is
            still closing, True otherwise.

        Raises:
            InvalidTransitionError: If a picker is already open
        """
        self._require_idle("open picker")
        if self.is_closing:
            self.logger.debug(f"Ignoring open_picker({target.value}) while picker is closing")
            return False
        self._move_to(PickerState.picking(target))
        return True

    def confirm_selection(self, asset: Asset) -> SwapState:
        """Write the chosen asset into the pending side and close the picker.

        A new source asset clears the amount so a stale number is never
        reinterpreted against a different asset.
        """
        if self._picker.phase != SelectionPhase.PICKING_ASSET:
            raise InvalidTransitionError("confirm selection", self._picker.describe())

        if self._picker.target == SelectionTarget.SOURCE:
            self._state = replace(self._state, source_asset=asset, source_amount_text="")
        else:
            self._state = replace(self._state, destination_asset=asset)

        self.logger.info(f"Selected {asset.symbol} as {self._picker.target.value}")
        self._close()
        return self._state

    def cancel_picker(self) -> None:
        if self._picker.phase != SelectionPhase.PICKING_ASSET:
            raise InvalidTransitionError("cancel picker", self._picker.describe())
        self._close()

    def flip(self, destination_amount: str) -> SwapState:
        """Swap source and destination.

        Args:
            destination_amount: Quote computed from the pre-flip state; it
                becomes the new amount to send.
        """
        self._require_idle("flip")
        self._state = SwapState(
            source_asset=self._state.destination_asset,
            destination_asset=self._state.source_asset,
            source_amount_text=destination_amount,
        )
        self.logger.info(
            f"Flipped pair to {self._state.source_asset.symbol} -> "
            f"{self._state.destination_asset.symbol}"
        )
        return self._state

    def set_max_amount(self) -> SwapState:
        """Use the full source balance, verbatim from the catalog."""
        self._require_idle("set max amount")
        self._state = replace(self._state, source_amount_text=self._state.source_asset.balance)
        return self._state
