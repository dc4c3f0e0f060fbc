"""Tests for the error classification hierarchy."""

from tj_app.config.validation import ValidationError
from tj_app.errors import (
    ConfigurationError,
    InvalidTradeInputError,
    MalformedTradeDataError,
    ReferenceDataError,
    TradeInputError,
    UnknownTimeframeError,
)


class TestTradeInputErrors:
    """Errors tied to a single trade snapshot."""

    def test_base_error(self):
        error = TradeInputError("bad trade", context={"trade_id": "t-1"})

        assert str(error) == "bad trade"
        assert error.context == {"trade_id": "t-1"}
        assert error.recoverable

    def test_invalid_input_carries_field(self):
        error = InvalidTradeInputError("lot_size must be positive", field="lot_size", value=0)

        assert isinstance(error, TradeInputError)
        assert error.field == "lot_size"
        assert error.value == 0
        assert error.context == {}

    def test_malformed_data_carries_raw_value(self):
        error = MalformedTradeDataError("Invalid date", raw_value="31/02", expected_format="YYYY-MM-DD")

        assert isinstance(error, TradeInputError)
        assert error.raw_value == "31/02"
        assert error.expected_format == "YYYY-MM-DD"


class TestReferenceDataErrors:
    """Errors tied to reference tables."""

    def test_base_error_not_recoverable(self):
        error = ReferenceDataError("session table broken")
        assert not error.recoverable

    def test_unknown_timeframe_recoverable(self):
        error = UnknownTimeframeError("Unknown timeframe: 'M2'", label="M2", field="entry_timeframe")

        assert isinstance(error, ReferenceDataError)
        assert error.recoverable
        assert error.label == "M2"
        assert error.field == "entry_timeframe"

    def test_configuration_error_lists_issues(self):
        issues = [ValidationError(field="assets.fallback_multiplier", message="Must be a positive number", value=0)]
        error = ConfigurationError("invalid tables", errors=issues)

        assert not error.recoverable
        assert error.errors == issues

    def test_families_are_disjoint(self):
        assert not issubclass(UnknownTimeframeError, TradeInputError)
        assert not issubclass(InvalidTradeInputError, ReferenceDataError)
