from datetime import date, datetime

import numpy as np
import pandas as pd
import pytest

from chartspec.services import format_number, format_timestamp
from chartspec.services.formatting import quote_token


@pytest.mark.parametrize(
    "value, expected",
    [
        (10, "10"),
        (10.0, "10"),
        (2.5, "2.5"),
        (-3.25, "-3.25"),
        (0, "0"),
        (0.0001, "0.0001"),
        (0.00001, "1e-05"),
        (1.5e-07, "1.5e-07"),
        (123456, "123456"),
        (999999.5, "999999.5"),
        (1e6, "1e+06"),
        (1234567.0, "1.234567e+06"),
        (-2.5e6, "-2.5e+06"),
        (1e21, "1e+21"),
        (np.int64(7), "7"),
        (np.float32(0.5), "0.5"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_timestamp_trims_fraction():
    assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05"
    assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5, 500000)) == "2024-01-02T03:04:05.5"
    assert format_timestamp(pd.Timestamp("2024-01-02 03:04:05.000000001")) == "2024-01-02T03:04:05.000000001"


def test_format_timestamp_accepts_dates():
    assert format_timestamp(date(2024, 1, 2)) == "2024-01-02T00:00:00"


def test_quote_token_escapes_quotes():
    assert quote_token("2024-01-02T00:00:00") == "'2024-01-02T00:00:00'"
    assert quote_token("it's") == "'it\\'s'"
