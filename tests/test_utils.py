import pytest

import utils
from models import Stage


@pytest.mark.parametrize(
    "value,expected",
    [
        ("42", 42),
        (" 7 ", 7),
        ("-3", -3),
    ],
)
def test_parse_int_valid(value, expected):
    assert utils.parse_int(value) == expected


@pytest.mark.parametrize(
    "value",
    ["abc", "4.5", "1e3", "12x"],
)
def test_parse_int_invalid(value):
    assert utils.parse_int(value) is None


@pytest.mark.parametrize("value", ["", "   ", None, 123])
def test_parse_int_non_string_or_blank(value):
    assert utils.parse_int(value) is None


def test_stage_from_choice():
    assert utils.stage_from_choice(1) is Stage.REGISTERED
    assert utils.stage_from_choice(5) is Stage.CLOSED
    assert utils.stage_from_choice(6) is None
    assert utils.stage_from_choice(0) is None
