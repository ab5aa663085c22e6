"""
Asset Catalog

Read-only accessor over the static asset list shown in the picker.
The catalog is read once and never mutated afterwards.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from pydantic import ValidationError

from ...config import settings
from .constants import ICON_KEYS
from .errors import CatalogError, UnknownAssetError
from .models import Asset
from .quote import format_catalog_value

logger = logging.getLogger(__name__)


def icon_key(symbol: str) -> Optional[str]:
    """Glyph key for a symbol, or None when the UI should render the symbol text."""
    return ICON_KEYS.get(symbol.upper())


@dataclass(frozen=True)
class PickerEntry:
    """One row of the asset picker."""

    asset: Asset
    value_label: str
    icon_key: Optional[str]

    @property
    def key(self) -> str:
        return self.asset.id or self.asset.symbol

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.key,
            "name": self.asset.name or self.asset.symbol,
            "symbol": self.asset.symbol,
            "balance": self.asset.balance,
            "valueLabel": self.value_label,
            "iconKey": self.icon_key,
        }


class AssetCatalog:
    """Ordered, symbol-indexed collection of catalog assets."""

    def __init__(self, assets: Iterable[Asset]):
        self._assets: List[Asset] = list(assets)
        self._by_symbol: Dict[str, Asset] = {}
        for asset in self._assets:
            key = asset.symbol.upper()
            if key in self._by_symbol:
                raise CatalogError(f"Duplicate catalog symbol: {asset.symbol}", details={"symbol": asset.symbol})
            self._by_symbol[key] = asset

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "AssetCatalog":
        assets: List[Asset] = []
        for index, record in enumerate(records):
            try:
                assets.append(Asset.model_validate(record))
            except ValidationError as exc:
                raise CatalogError(
                    f"Invalid catalog record at index {index}",
                    details={"index": index, "errors": exc.errors(include_url=False)},
                ) from exc
        return cls(assets)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "AssetCatalog":
        """Load the catalog from a JSON array of asset records."""
        catalog_path = Path(path) if path is not None else settings.catalog_path
        try:
            raw = json.loads(catalog_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise CatalogError(f"Cannot read catalog at {catalog_path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Catalog at {catalog_path} is not valid JSON: {exc}") from exc

        if not isinstance(raw, list):
            raise CatalogError(f"Catalog at {catalog_path} must be a JSON array")

        catalog = cls.from_records(raw)
        logger.info("Loaded %d assets from %s", len(catalog), catalog_path)
        return catalog

    def __len__(self) -> int:
        return len(self._assets)

    def __iter__(self) -> Iterator[Asset]:
        return iter(self._assets)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol.upper() in self._by_symbol

    def get(self, symbol: str) -> Asset:
        asset = self._by_symbol.get(symbol.upper())
        if asset is None:
            raise UnknownAssetError(symbol)
        return asset

    def find(self, symbol: str) -> Optional[Asset]:
        return self._by_symbol.get(symbol.upper())

    @property
    def symbols(self) -> List[str]:
        return [asset.symbol for asset in self._assets]

    def picker_entries(self) -> List[PickerEntry]:
        return [
            PickerEntry(
                asset=asset,
                value_label=format_catalog_value(asset.reference_value),
                icon_key=icon_key(asset.symbol),
            )
            for asset in self._assets
        ]
