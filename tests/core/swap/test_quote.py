"""
Tests for the quote engine

Destination amounts, rate labels and the submission gate.
"""

from decimal import Decimal

import pytest

from swapdesk.core.swap import (
    Asset,
    DegenerateRateError,
    SwapState,
    balance_label,
    compute_destination_amount,
    compute_exchange_rate_label,
    format_catalog_value,
    is_submission_enabled,
    parse_amount,
    quote_state,
    submission_label,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def wbtc() -> Asset:
    return Asset(symbol="WBTC", balance="0.005", reference_value="110554.89")


@pytest.fixture
def usd() -> Asset:
    return Asset(symbol="USD", balance="321.33", reference_value="1.00")


@pytest.fixture
def worthless() -> Asset:
    return Asset(symbol="NULL", balance="10", reference_value="0")


# =============================================================================
# Parsing
# =============================================================================

class TestParseAmount:

    @pytest.mark.parametrize("text", [None, "", "   ", "abc", "1.2.3", "NaN", "Infinity"])
    def test_unparseable_is_none(self, text):
        assert parse_amount(text) is None

    @pytest.mark.parametrize("text,expected", [("0.", "0"), ("1.5", "1.5"), ("0.005", "0.005")])
    def test_parses_decimals(self, text, expected):
        assert parse_amount(text) == Decimal(expected)


# =============================================================================
# Destination Amount
# =============================================================================

class TestComputeDestinationAmount:

    def test_wbtc_to_usd(self, wbtc, usd):
        """0.005 WBTC at 110554.89 is 552.77445 USD."""
        assert compute_destination_amount("0.005", wbtc, usd) == "552.77445"

    @pytest.mark.parametrize("text", ["", "0", "0.", "0.000", "abc"])
    def test_empty_or_zero_amount_quotes_zero(self, text, wbtc, usd):
        assert compute_destination_amount(text, wbtc, usd) == "0"

    def test_always_five_decimal_places(self, usd, wbtc):
        assert compute_destination_amount("1", usd, usd) == "1.00000"
        assert compute_destination_amount("1", usd, wbtc) == "0.00001"

    def test_no_scientific_notation(self, wbtc, usd):
        assert compute_destination_amount("999999.999", wbtc, usd) == "110554889889.44511"

    def test_rounds_half_up(self):
        source = Asset(symbol="A", balance="1", reference_value="1")
        destination = Asset(symbol="B", balance="1", reference_value="8")
        # 0.1 / 8 = 0.0125 -> 0.01250, 0.001 / 8 = 0.000125 -> 0.00013
        assert compute_destination_amount("0.1", source, destination) == "0.01250"
        assert compute_destination_amount("0.001", source, destination) == "0.00013"

    def test_linear_in_amount(self, wbtc, usd):
        single = Decimal(compute_destination_amount("0.002", wbtc, usd))
        double = Decimal(compute_destination_amount("0.004", wbtc, usd))
        assert abs(double - 2 * single) <= Decimal("0.00001")

    def test_flip_round_trip(self, wbtc, usd):
        forward = compute_destination_amount("0.005", wbtc, usd)
        back = compute_destination_amount(forward, usd, wbtc)
        assert abs(Decimal(back) - Decimal("0.005")) <= Decimal("0.00001")

    def test_same_asset_both_sides_is_one_to_one(self, wbtc):
        assert compute_destination_amount("0.005", wbtc, wbtc) == "0.00500"

    def test_zero_destination_value_raises(self, wbtc, worthless):
        with pytest.raises(DegenerateRateError) as exc_info:
            compute_destination_amount("0.005", wbtc, worthless)

        assert exc_info.value.destination_symbol == "NULL"
        assert exc_info.value.to_dict()["category"] == "degenerate_rate"

    def test_zero_amount_short_circuits_degenerate_rate(self, wbtc, worthless):
        assert compute_destination_amount("", wbtc, worthless) == "0"


# =============================================================================
# Exchange Rate Label
# =============================================================================

class TestExchangeRateLabel:

    def test_grouped_two_decimals(self, wbtc, usd):
        assert compute_exchange_rate_label(wbtc, usd) == "1 WBTC: 110,554.89 USD"

    def test_small_rate(self, usd, wbtc):
        assert compute_exchange_rate_label(usd, wbtc) == "1 USD: 0.00 WBTC"

    def test_uses_display_names(self, usd):
        euro = Asset(display_name="Euro", symbol="EUR", balance="1", reference_value="1.17")
        assert compute_exchange_rate_label(euro, usd) == "1 Euro: 1.17 USD"

    def test_zero_destination_value_raises(self, wbtc, worthless):
        with pytest.raises(DegenerateRateError):
            compute_exchange_rate_label(wbtc, worthless)


# =============================================================================
# Submission Gate
# =============================================================================

class TestSubmissionGate:

    def test_full_balance_is_enabled(self, wbtc):
        assert is_submission_enabled("0.005", wbtc) is True

    def test_above_balance_is_disabled(self, wbtc):
        assert is_submission_enabled("0.006", wbtc) is False

    @pytest.mark.parametrize("text", ["", "0", "0.", "abc"])
    def test_empty_zero_or_garbage_is_disabled(self, text, wbtc):
        assert is_submission_enabled(text, wbtc) is False

    def test_boundary_with_larger_balance(self, usd):
        assert is_submission_enabled("321.33", usd) is True
        assert is_submission_enabled("321.331", usd) is False

    def test_labels(self, wbtc):
        assert submission_label(True) == "Preview"
        assert submission_label(False) == "Incorrect Order"
        assert balance_label(wbtc) == "Balance: 0.005"


# =============================================================================
# Picker Value Labels
# =============================================================================

class TestFormatCatalogValue:

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("110554.89", "≈ 110,554.89"),
            ("1.00", "≈ 1.00"),
            ("1234.5", "≈ 1,234.50"),
            ("0.2134", "≈ $ 0.213"),
            ("0.0475", "≈ $ 0.048"),
            ("0", "≈ $ 0.000"),
        ],
    )
    def test_formats(self, value, expected):
        assert format_catalog_value(value) == expected


# =============================================================================
# Derived Quote
# =============================================================================

class TestQuoteState:

    def test_quote_for_default_pair(self, wbtc, usd):
        quote = quote_state(SwapState(wbtc, usd, "0.005"))

        assert quote.destination_amount == "552.77445"
        assert quote.exchange_rate_label == "1 WBTC: 110,554.89 USD"
        assert quote.submission_enabled is True
        assert quote.submission_label == "Preview"
        assert quote.rate_available is True

    def test_degenerate_pair_reports_unavailable(self, wbtc, worthless):
        quote = quote_state(SwapState(wbtc, worthless, "0.001"))

        assert quote.destination_amount is None
        assert quote.exchange_rate_label is None
        assert quote.rate_available is False
        assert quote.submission_enabled is True

    def test_degenerate_pair_with_empty_amount_quotes_zero(self, wbtc, worthless):
        quote = quote_state(SwapState(wbtc, worthless, ""))

        assert quote.destination_amount == "0"
        assert quote.exchange_rate_label is None


# =============================================================================
# Large Magnitudes
# =============================================================================

class TestLargeMagnitudes:
    """Digit counts beyond the default decimal context still format exactly."""

    def test_nineteen_digit_amount(self, wbtc, usd):
        assert compute_destination_amount("1" * 19, wbtc, usd) == "122838766666666666654382.79000"

    def test_nineteen_digit_amount_round_trips(self, wbtc, usd):
        forward = compute_destination_amount("1" * 19, wbtc, usd)

        assert compute_destination_amount(forward, usd, wbtc) == "1111111111111111111.00000"

    def test_forty_digit_amount_keeps_every_digit(self, usd):
        amount = "9" * 40 + ".999"

        assert compute_destination_amount(amount, usd, usd) == amount + "00"

    def test_huge_rate_label(self):
        source = Asset(symbol="BIG", balance="1", reference_value="1")
        destination = Asset(symbol="DUST", balance="1", reference_value="1e-30")

        assert compute_exchange_rate_label(source, destination) == f"1 BIG: {10 ** 30:,}.00 DUST"

    def test_huge_catalog_value(self):
        assert format_catalog_value("1e30") == f"≈ {10 ** 30:,}.00"

    def test_huge_quote_state(self, wbtc, usd):
        quote = quote_state(SwapState(wbtc, usd, "1" * 19))

        assert quote.destination_amount == "122838766666666666654382.79000"
        assert quote.submission_enabled is False
