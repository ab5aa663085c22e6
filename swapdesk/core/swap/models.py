"""Typed models used by the swap subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class Asset(BaseModel):
    """A catalog record for a tradable asset.

    ``balance`` and ``reference_value`` stay as decimal strings; they are only
    parsed when a quote is computed.
    """

    model_config = ConfigDict(frozen=True)

    display_name: str = Field(default="", description="Label shown next to amounts and in rates")
    symbol: str = Field(description="Ticker used for lookups (e.g. WBTC, USD)")
    balance: str = Field(description="Available balance as a decimal string")
    reference_value: str = Field(
        validation_alias=AliasChoices("reference_value", "usdValue"),
        description="Price in the common reference unit as a decimal string",
    )
    id: Optional[str] = Field(default=None, description="Stable catalog identifier")
    name: Optional[str] = Field(default=None, description="Full name shown in the picker list")

    @field_validator("symbol")
    @classmethod
    def _strip_symbol(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("symbol must not be empty")
        return value

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @field_validator("balance", "reference_value", mode="before")
    @classmethod
    def _validate_decimal_string(cls, value: Any) -> str:
        text = str(value).strip()
        try:
            parsed = Decimal(text)
        except InvalidOperation as exc:
            raise ValueError(f"not a decimal quantity: {value!r}") from exc
        if not parsed.is_finite() or parsed < 0:
            raise ValueError(f"must be a finite, non-negative quantity: {value!r}")
        return text

    @model_validator(mode="before")
    @classmethod
    def _default_display_name(cls, data: Any) -> Any:
        # Selected records are labelled by their symbol, not the full name.
        if isinstance(data, dict) and not data.get("display_name"):
            data = {**data, "display_name": str(data.get("symbol", "")).strip()}
        return data

    @property
    def balance_decimal(self) -> Decimal:
        return Decimal(self.balance)

    @property
    def reference_value_decimal(self) -> Decimal:
        return Decimal(self.reference_value)


class SelectionTarget(str, Enum):
    """Which side a pending picker interaction writes into."""

    SOURCE = "source"
    DESTINATION = "destination"


class SelectionPhase(str, Enum):
    """Phases of the asset picker."""

    IDLE = "idle"
    PICKING_ASSET = "picking_asset"


@dataclass(frozen=True)
class PickerState:
    """Tagged picker state; ``target`` is only set while picking."""

    phase: SelectionPhase = SelectionPhase.IDLE
    target: Optional[SelectionTarget] = None

    @classmethod
    def idle(cls) -> "PickerState":
        return cls()

    @classmethod
    def picking(cls, target: SelectionTarget) -> "PickerState":
        return cls(phase=SelectionPhase.PICKING_ASSET, target=target)

    @property
    def is_idle(self) -> bool:
        return self.phase == SelectionPhase.IDLE

    def describe(self) -> str:
        if self.target is None:
            return self.phase.value
        return f"{self.phase.value}({self.target.value})"


@dataclass(frozen=True)
class SwapState:
    """The pair being exchanged and the raw amount text being edited."""

    source_asset: Asset
    destination_asset: Asset
    source_amount_text: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sourceAsset": self.source_asset.symbol,
            "destinationAsset": self.destination_asset.symbol,
            "sourceAmountText": self.source_amount_text,
        }


@dataclass(frozen=True)
class SwapQuote:
    """Derived quote outputs; ``None`` means the rate is unavailable."""

    destination_amount: Optional[str]
    exchange_rate_label: Optional[str]
    submission_enabled: bool
    submission_label: str

    @property
    def rate_available(self) -> bool:
        return self.exchange_rate_label is not None
