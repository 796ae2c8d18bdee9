import pytest

from pgtypes.domain.exceptions import NumericParseError
from pgtypes.domain.services.text import ParsedLiteral, format_abs, parse_literal, parse_unsigned


@pytest.mark.parametrize(
    "literal, expected",
    [
        ("NaN", ParsedLiteral(nan=True, negative=False, digits=(), weight=0)),
        ("-0.0", ParsedLiteral(nan=False, negative=False, digits=(), weight=0)),
        ("-12.5", ParsedLiteral(nan=False, negative=True, digits=(12, 5000), weight=0)),
        ("+.0001", ParsedLiteral(nan=False, negative=False, digits=(1,), weight=-1)),
        ("12345678", ParsedLiteral(nan=False, negative=False, digits=(1234, 5678), weight=1)),
    ],
)
def test_parse_literal(literal, expected):
    assert parse_literal(literal) == expected


@pytest.mark.parametrize(
    "body, expected",
    [
        ("0", ((), 0)),
        ("000.000", ((), 0)),
        ("1", ((1,), 0)),
        ("10000", ((1,), 1)),
        ("0.00001", ((1000,), -2)),
        ("99999.99999", ((9, 9999, 9999, 9000), 1)),
    ],
)
def test_parse_unsigned(body, expected):
    assert parse_unsigned(body, body) == expected


def test_parse_error_carries_whole_literal():
    with pytest.raises(NumericParseError) as exc_info:
        parse_literal("-1.2.3")

    assert exc_info.value.literal == "-1.2.3"
    assert "-1.2.3" in str(exc_info.value)


@pytest.mark.parametrize(
    "digits, weight, expected",
    [
        ((), 0, "0"),
        ((1,), 0, "1"),
        ((1000,), 1, "10000000"),
        ((1,), 3, "1000000000000"),
        ((7891,), -2, "0.00007891"),
        ((12,), -1, "0.0012"),
        ((1, 1), 0, "1.0001"),
        ((123, 4560), 0, "123.456"),
        ((5, 0, 5), 1, "50000.0005"),
    ],
)
def test_format_abs(digits, weight, expected):
    assert format_abs(digits, weight) == expected
