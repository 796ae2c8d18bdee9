import random

import pytest

from pgtypes.domain.exceptions import InvalidNumericError
from pgtypes.domain.values import Numeric, Sign

INT_CASES = [
    0,
    1,
    2,
    3,
    998,
    999,
    1000,
    1001,
    9999,
    12345678,
    123456789,
    2**31 - 2,
    2**31 - 1,
    -1,
    -2,
    -3,
    -998,
    -999,
    -1000,
    -1001,
    -9999,
    -12345678,
    -123456789,
    -(2**31),
    -(2**31) + 1,
]


def N(literal: str) -> Numeric:
    return Numeric.from_string(literal)


def test_add_sub_mul_match_integer_arithmetic():
    for v1 in INT_CASES:
        for v2 in INT_CASES:
            a, b = N(str(v1)), N(str(v2))

            assert str(a + b) == str(v1 + v2), (v1, v2)
            assert str(a - b) == str(v1 - v2), (v1, v2)
            assert str(a * b) == str(v1 * v2), (v1, v2)


def test_cmp_matches_integer_order():
    for v1 in INT_CASES:
        for v2 in INT_CASES:
            expected = (v1 > v2) - (v1 < v2)

            assert N(str(v1)).cmp(N(str(v2))) == expected, (v1, v2)


def test_exact_algebra_on_random_large_integers():
    rng = random.Random(1700)

    for _ in range(300):
        v1 = rng.randint(-(10**40), 10**40)
        v2 = rng.randint(-(10**25), 10**25)
        a, b = Numeric.from_int(v1), Numeric.from_int(v2)

        assert int(a + b) == v1 + v2
        assert int(a - b) == v1 - v2
        assert int(a * b) == v1 * v2


@pytest.mark.parametrize(
    "x, y, expected",
    [
        ("0.5", "0.5", "1"),
        ("9999.9999", "0.0001", "10000"),
        ("-1.5", "1.5", "0"),
        ("1.5", "-0.25", "1.25"),
        ("0.0000789", "123.456", "123.4560789"),
        ("-0.001", "-0.0009", "-0.0019"),
        ("99999999", "1", "100000000"),
    ],
)
def test_add_decimals(x, y, expected):
    assert str(N(x) + N(y)) == expected
    assert str(N(y).add(N(x))) == expected


@pytest.mark.parametrize(
    "x, y, expected",
    [
        ("1", "0.0001", "0.9999"),
        ("0.0001", "1", "-0.9999"),
        ("100000000", "1", "99999999"),
        ("-1.5", "-1.5", "0"),
        ("-1.5", "1.5", "-3"),
        ("123.456", "0.456", "123"),
        ("0", "12.5", "-12.5"),
        ("12.5", "0", "12.5"),
    ],
)
def test_sub_decimals(x, y, expected):
    assert str(N(x) - N(y)) == expected


@pytest.mark.parametrize(
    "x, y, expected",
    [
        ("1.5", "-2", "-3"),
        ("0.0001", "0.0001", "0.00000001"),
        ("-0.5", "-0.5", "0.25"),
        ("9999", "9999", "99980001"),
        ("123.456", "1000", "123456"),
        ("0", "-5", "0"),
        ("99999999.9999", "99999999.9999", "9999999999980000.00000001"),
    ],
)
def test_mul_decimals(x, y, expected):
    assert str(N(x) * N(y)) == expected


def test_zero_results_are_canonical():
    results = [
        N("-1.5") + N("1.5"),
        N("-2") - N("-2"),
        N("-3") * N("0"),
    ]

    for r in results:
        assert r.sign is Sign.POSITIVE
        assert r.digits == ()
        assert r.weight == 0


def test_nan_absorbs_arithmetic():
    nan, zero, one = Numeric.nan(), Numeric.zero(), N("1")

    for x, y in [(nan, nan), (nan, zero), (zero, nan), (nan, one), (one, nan)]:
        assert (x + y).is_nan()
        assert (x - y).is_nan()
        assert (x * y).is_nan()

    assert str(N("NaN") + N("1")) == "NaN"


def test_operands_are_not_mutated():
    # Given
    a = N("123.456")
    b = N("-0.456")

    # When
    a + b
    a * b
    a - b

    # Then
    assert str(a) == "123.456"
    assert str(b) == "-0.456"


def test_int_operands_are_coerced():
    x = N("1.5")

    assert x + 1 == N("2.5")
    assert 1 + x == N("2.5")
    assert 3 - x == N("1.5")
    assert x * 2 == N("3")
    assert 2 * x == N("3")


def test_unsupported_operand_types():
    with pytest.raises(TypeError):
        N("1") + 1.5

    with pytest.raises(TypeError):
        N("1") < 2

    assert (N("1") == 1) is False


@pytest.mark.parametrize(
    "x, expected",
    [("0", "0"), ("NaN", "NaN"), ("1", "-1"), ("-1", "1"), ("-0.5", "0.5")],
)
def test_neg(x, expected):
    assert str(-N(x)) == expected
    assert str(N(x).neg()) == expected


def test_abs_and_pos():
    assert abs(N("-12.5")) == N("12.5")
    assert N("12.5").abs() == N("12.5")
    assert abs(Numeric.nan()).is_nan()
    assert +N("-1") == N("-1")


@pytest.mark.parametrize(
    "s1, s2, expected",
    [
        ("123.456", "0.0000789", 1),
        ("0.0000789", "123.456", -1),
        ("0.0000789", "0.0000789", 0),
        ("0.000078912345678", "0.0000789", 1),
        ("0.00007891", "0.000078912345678", -1),
        ("0.000078912345678", "0.00007891", 1),
        ("0.0000789", "0.000078912345678", -1),
        ("123.456", "123.457", -1),
        ("123.457", "123.456", 1),
        ("123.456", "1.2345678", 1),
        ("1.2345678", "123.456", -1),
        ("-1", "0.5", -1),
        ("0", "-0.5", 1),
        ("-2", "-1", -1),
        ("NaN", "1.2345678", 1),
        ("1.2345678", "NaN", -1),
        ("NaN", "NaN", 0),
        ("NaN", "-99999", 1),
    ],
)
def test_cmp(s1, s2, expected):
    assert N(s1).cmp(N(s2)) == expected


def test_rich_comparisons_follow_total_order():
    values = [N("NaN"), N("1"), N("-5"), N("0"), N("0.5"), N("NaN")]

    assert sorted(values) == [N("-5"), N("0"), N("0.5"), N("1"), N("NaN"), N("NaN")]
    assert N("NaN") == Numeric.nan()
    assert N("NaN") > N("1000")
    assert N("1") <= N("1.0")
    assert N("2") >= N("1.9999")


def test_equal_values_hash_equal():
    assert hash(N("1.50")) == hash(N("001.5"))
    assert len({N("1.5"), N("1.50"), N("NaN"), Numeric.nan()}) == 2


def test_sign_value_and_predicates():
    assert Numeric.zero().sign_value() == 0
    assert Numeric.nan().sign_value() == 2
    assert N("1").sign_value() == 1
    assert N("-1").sign_value() == -1

    assert N("-1").is_negative()
    assert not N("0").is_negative()
    assert Numeric().is_zero()
    assert Numeric.nan().is_nan()


def test_scale_emulates_display_scale():
    assert N("123").scale() == 0
    assert N("123.4").scale() == 4
    assert N("0.00001").scale() == 8
    assert N("10000000").scale() == 0


def test_copy_is_equal_and_independent():
    x = N("-98765.4321")

    y = x.copy()

    assert y == x
    assert y is not x
    assert y.digits == x.digits


def test_from_components_canonicalizes():
    # When
    n = Numeric.from_components(Sign.POSITIVE, [0, 1, 2000, 0, 0], 2)
    z = Numeric.from_components(Sign.NEGATIVE, [0, 0], 5)
    nan = Numeric.from_components(Sign.NAN, [], 99)

    # Then
    assert (n.digits, n.weight) == ((1, 2000), 1)
    assert str(n) == "12000"
    assert z == Numeric.zero() and z.sign is Sign.POSITIVE
    assert nan.is_nan() and nan.weight == 0


@pytest.mark.parametrize(
    "sign, digits, weight",
    [
        (Sign.POSITIVE, [10000], 0),
        (Sign.POSITIVE, [-1], 0),
        (Sign.POSITIVE, [1.5], 0),
        (Sign.NAN, [1], 0),
        ("+", [1], 0),
        (Sign.POSITIVE, [1], 1.5),
    ],
)
def test_from_components_rejects_invalid_input(sign, digits, weight):
    with pytest.raises(InvalidNumericError):
        Numeric.from_components(sign, digits, weight)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"sign": Sign.POSITIVE, "digits": (0, 1), "weight": 0},
        {"sign": Sign.POSITIVE, "digits": (1, 0), "weight": 0},
        {"sign": Sign.NEGATIVE, "digits": (), "weight": 0},
        {"sign": Sign.POSITIVE, "digits": (), "weight": 3},
        {"sign": Sign.NAN, "digits": (5,), "weight": 0},
        {"sign": Sign.POSITIVE, "digits": (10000,), "weight": 0},
        {"sign": Sign.POSITIVE, "digits": (1,), "weight": 1.5},
        {"sign": Sign.POSITIVE, "digits": (1,), "weight": True},
        {"sign": Sign.POSITIVE, "digits": (), "weight": "0"},
    ],
)
def test_constructor_enforces_invariants(kwargs):
    with pytest.raises(InvalidNumericError):
        Numeric(**kwargs)
