# file: tests/test_analysis_validator.py
import copy
import math

import pytest

from tradejournal.services.analysis.errors import (
    AnalysisValidationError,
    BatchTooLargeError,
    EmptyBatchError,
    InvalidElementError,
    InvalidEntryPriceError,
    InvalidPairError,
    InvalidRiskPercentError,
    InvalidStopLossError,
    MalformedRequestError,
)
from tradejournal.services.analysis.validator import validate_analysis_request
from tests.conftest import VALID_TRADE


def test_valid_single_trade_is_accepted():
    batch = validate_analysis_request({"trades": [VALID_TRADE]})

    assert len(batch) == 1
    assert batch[0].crypto_pair == "BTC/USDT"
    assert batch[0].entry_price == 50000
    assert batch[0].risk_percent == 1.5


def test_ten_trades_is_the_limit():
    assert len(validate_analysis_request({"trades": [VALID_TRADE] * 10})) == 10


@pytest.mark.parametrize("body", [None, [], "trades", {}, {"trades": None}, {"trades": {"0": VALID_TRADE}}])
def test_malformed_body(body):
    with pytest.raises(MalformedRequestError) as exc_info:
        validate_analysis_request(body)
    assert exc_info.value.message == "Invalid request: trades array is required"


def test_empty_batch():
    with pytest.raises(EmptyBatchError) as exc_info:
        validate_analysis_request({"trades": []})
    assert exc_info.value.message == "At least one trade is required"


def test_batch_too_large():
    with pytest.raises(BatchTooLargeError) as exc_info:
        validate_analysis_request({"trades": [VALID_TRADE] * 11})
    assert exc_info.value.message == "Maximum 10 trades allowed per analysis"


def test_empty_pair_names_first_trade():
    body = {"trades": [{"crypto_pair": "", "entry_price": 1, "stop_loss": 1, "risk_percent": 1}]}

    with pytest.raises(InvalidPairError) as exc_info:
        validate_analysis_request(body)

    assert exc_info.value.index == 1
    assert exc_info.value.message == "Invalid crypto_pair at trade 1"


def test_non_object_element_reports_position():
    with pytest.raises(InvalidElementError) as exc_info:
        validate_analysis_request({"trades": [VALID_TRADE, None]})

    assert exc_info.value.index == 2
    assert exc_info.value.message == "Invalid trade at position 2"


@pytest.mark.parametrize(
    "field, value, error",
    [
        ("crypto_pair", "X" * 21, InvalidPairError),
        ("crypto_pair", 42, InvalidPairError),
        ("entry_price", 0, InvalidEntryPriceError),
        ("entry_price", "50000", InvalidEntryPriceError),
        ("entry_price", True, InvalidEntryPriceError),
        ("entry_price", math.inf, InvalidEntryPriceError),
        ("stop_loss", -1, InvalidStopLossError),
        ("stop_loss", math.nan, InvalidStopLossError),
        ("risk_percent", -0.01, InvalidRiskPercentError),
        ("risk_percent", 100.5, InvalidRiskPercentError),
        ("risk_percent", None, InvalidRiskPercentError),
    ],
)
def test_field_checks(field, value, error):
    bad = dict(VALID_TRADE, **{field: value})

    with pytest.raises(error) as exc_info:
        validate_analysis_request({"trades": [VALID_TRADE, VALID_TRADE, bad]})

    assert exc_info.value.index == 3
    assert exc_info.value.message == f"Invalid {field} at trade 3"


def test_first_failure_wins():
    bad = {"crypto_pair": "", "entry_price": -1, "stop_loss": -1, "risk_percent": 500}

    with pytest.raises(InvalidPairError):
        validate_analysis_request({"trades": [bad]})


def test_boundaries_are_inclusive():
    edge = {"crypto_pair": "X" * 20, "entry_price": 0.0001, "stop_loss": 0.0001, "risk_percent": 100}
    zero_risk = dict(VALID_TRADE, risk_percent=0)

    assert len(validate_analysis_request({"trades": [edge, zero_risk]})) == 2


def test_input_is_not_mutated():
    body = {"trades": [dict(VALID_TRADE, note="extra"), dict(VALID_TRADE)]}
    snapshot = copy.deepcopy(body)

    validate_analysis_request(body)

    assert body == snapshot


def test_all_validation_errors_share_a_base():
    with pytest.raises(AnalysisValidationError):
        validate_analysis_request({"trades": []})


def test_pair_length_counts_utf16_units():
    # Each rocket is one code point but two UTF-16 units
    fits = dict(VALID_TRADE, crypto_pair="\U0001F680" * 10)
    too_long = dict(VALID_TRADE, crypto_pair="\U0001F680" * 11)

    assert len(validate_analysis_request({"trades": [fits]})) == 1
    with pytest.raises(InvalidPairError) as exc_info:
        validate_analysis_request({"trades": [too_long]})
    assert exc_info.value.index == 1
