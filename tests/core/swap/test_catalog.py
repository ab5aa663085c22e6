"""
Tests for the Asset Catalog
"""

import json

import pytest
from pydantic import ValidationError

from swapdesk.core.swap import (
    Asset,
    AssetCatalog,
    CatalogError,
    UnknownAssetError,
    icon_key,
)


@pytest.fixture
def records():
    return [
        {"id": 1, "name": "Wrapped Bitcoin", "symbol": "WBTC", "balance": "0.005", "usdValue": "110554.89"},
        {"id": 2, "name": "Dogecoin", "symbol": "DOGE", "balance": "1500", "usdValue": "0.2134"},
        {"id": 3, "name": "Mystery", "symbol": "ZZZ", "balance": "1", "usdValue": "2"},
    ]


class TestAssetModel:

    def test_display_name_defaults_to_symbol(self, records):
        asset = Asset.model_validate(records[0])

        assert asset.display_name == "WBTC"
        assert asset.name == "Wrapped Bitcoin"
        assert asset.id == "1"
        assert asset.reference_value == "110554.89"

    def test_assets_are_immutable(self, records):
        asset = Asset.model_validate(records[0])

        with pytest.raises(ValidationError):
            asset.balance = "1"

    @pytest.mark.parametrize("balance", ["-1", "abc", "NaN"])
    def test_rejects_bad_quantities(self, balance):
        with pytest.raises(ValueError):
            Asset(symbol="X", balance=balance, reference_value="1")


class TestAssetCatalog:

    def test_lookup_by_symbol(self, records):
        catalog = AssetCatalog.from_records(records)

        assert catalog.get("DOGE").balance == "1500"
        assert catalog.get("doge").symbol == "DOGE"
        assert "WBTC" in catalog
        assert catalog.find("ETH") is None

    def test_unknown_symbol_raises(self, records):
        catalog = AssetCatalog.from_records(records)

        with pytest.raises(UnknownAssetError) as exc_info:
            catalog.get("ETH")

        assert exc_info.value.symbol == "ETH"

    def test_preserves_order(self, records):
        catalog = AssetCatalog.from_records(records)

        assert catalog.symbols == ["WBTC", "DOGE", "ZZZ"]
        assert len(catalog) == 3

    def test_duplicate_symbol_rejected(self, records):
        with pytest.raises(CatalogError):
            AssetCatalog.from_records(records + [records[0]])

    def test_invalid_record_rejected(self, records):
        records[1]["balance"] = "-5"

        with pytest.raises(CatalogError) as exc_info:
            AssetCatalog.from_records(records)

        assert exc_info.value.details["index"] == 1

    def test_picker_entries(self, records):
        entries = AssetCatalog.from_records(records).picker_entries()

        assert [entry.key for entry in entries] == ["1", "2", "3"]
        assert entries[0].value_label == "≈ 110,554.89"
        assert entries[1].value_label == "≈ $ 0.213"
        assert entries[0].icon_key == "token/btc"
        assert entries[2].icon_key is None
        assert entries[1].to_dict()["name"] == "Dogecoin"


class TestCatalogLoading:

    def test_load_from_file(self, tmp_path, records):
        path = tmp_path / "assets.json"
        path.write_text(json.dumps(records), encoding="utf-8")

        catalog = AssetCatalog.load(path)

        assert catalog.symbols == ["WBTC", "DOGE", "ZZZ"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            AssetCatalog.load(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "assets.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CatalogError):
            AssetCatalog.load(path)

    def test_non_array_payload(self, tmp_path):
        path = tmp_path / "assets.json"
        path.write_text(json.dumps({"symbol": "WBTC"}), encoding="utf-8")

        with pytest.raises(CatalogError):
            AssetCatalog.load(path)

    def test_bundled_catalog(self):
        catalog = AssetCatalog.load()

        assert catalog.get("WBTC").reference_value == "110554.89"
        assert catalog.get("USD").balance == "321.33"


class TestIconKeys:

    def test_token_and_currency_icons(self):
        assert icon_key("ETH") == "token/eth"
        assert icon_key("cny") == "currency/rmb"
        assert icon_key("XYZ") is None
