import math
import pytest
from decimal import Decimal

from bigdecimal.core.decimals import BigDecimal
from bigdecimal.core.exc import DecimalDomainError
from bigdecimal.core.parse import decimal
from bigdecimal.core.rounding import Round, STD_ROUNDING, round_increment


def _d(x: str) -> BigDecimal:
    return decimal(x)


R = Round
_MODES = [
    R.HALF_EVEN,
    R.HALF_CEILING,
    R.HALF_FLOOR,
    R.HALF_TRUNCATE,
    R.HALF_AWAY_FROM_ZERO,
    R.CEILING,
    R.FLOOR,
    R.TRUNCATE,
    R.AWAY_FROM_ZERO,
]

# value -> expected integer per mode, in _MODES order
_TABLE = {
    "2.5":  [2, 3, 2, 2, 3, 3, 2, 2, 3],
    "-2.5": [-2, -2, -3, -2, -3, -2, -3, -2, -3],
    "3.5":  [4, 4, 3, 3, 4, 4, 3, 3, 4],
    "-3.5": [-4, -3, -4, -3, -4, -3, -4, -3, -4],
    "2.7":  [3, 3, 3, 3, 3, 3, 2, 2, 3],
    "-2.7": [-3, -3, -3, -3, -3, -2, -3, -2, -3],
    "2.3":  [2, 2, 2, 2, 2, 3, 2, 2, 3],
    "-2.3": [-2, -2, -2, -2, -2, -2, -3, -2, -3],
    "2":    [2, 2, 2, 2, 2, 2, 2, 2, 2],
    "0.01": [0, 0, 0, 0, 0, 1, 0, 0, 1],
    "-0.01": [0, 0, 0, 0, 0, 0, -1, 0, -1],
}


@pytest.mark.parametrize(
    "value,mode,expected",
    [(v, m, e) for v, row in _TABLE.items() for m, e in zip(_MODES, row)],
)
def test_round_mode_table(value, mode, expected):
    got = _d(value).round(mode)
    print(f"[round] {value} {mode.value} -> {got}; expect {expected}")
    assert got == expected
    assert got.is_int()


def test_half_even_ties():
    print("[half-even] 2.5 -> 2, 3.5 -> 4")
    assert BigDecimal.from_components(25, -1).round_to_prec(0, R.HALF_EVEN) == 2
    assert BigDecimal.from_components(35, -1).round_to_prec(0, R.HALF_EVEN) == 4


def test_truncate_preserves_sign():
    print("[truncate] -1.5 -> -1, 1.5 -> 1")
    assert BigDecimal.from_components(-15, -1).truncate() == -1
    assert BigDecimal.from_components(15, -1).truncate() == 1


@pytest.mark.parametrize(
    "value,prec,expected",
    [
        ("1.2345", 2, "1.23"),
        ("1.235", 2, "1.24"),    # tie, 123 is odd -> up
        ("1.245", 2, "1.24"),    # tie, 124 is even -> stay
        ("2.675", 2, "2.68"),
        ("-1.235", 2, "-1.24"),
        ("1234", -2, "1200"),
        ("1250", -2, "1200"),
        ("1350", -2, "1400"),
        ("0.0004", 3, "0"),
        ("9.9996", 3, "10"),
    ],
)
def test_round_to_prec_half_even(value, prec, expected):
    got = _d(value).round_to_prec(prec)
    print(f"[round_to_prec] {value} @ {prec} -> {got}; expect {expected}")
    assert got == _d(expected)


def test_round_to_prec_result_exponent_and_no_op():
    x = _d("3.14159")
    r = x.round_to_prec(2, R.HALF_EVEN)
    # Result lands on the canonical block containing -prec.
    assert r.exp == -7
    assert r == _d("3.14")
    five = BigDecimal.from_int(5)
    assert five.round_to_prec(2) is five
    assert _d("1.5").round_to_prec(3) == _d("1.5")


def test_round_to_prec_accepts_mode_strings():
    assert _d("2.5").round_to_prec(0, "half-away-from-zero") == 3
    with pytest.raises(DecimalDomainError):
        _d("2.5").round_to_prec(0, "banker")


@pytest.mark.parametrize("mode", sorted(STD_ROUNDING, key=lambda m: m.value))
@pytest.mark.parametrize("value", ["1.005", "-1.005", "2.675", "-0.125", "123.4550", "-9.995", "0.0049", "7"])
def test_modes_match_std_decimal_quantize(mode, value):
    expected = Decimal(value).quantize(Decimal("0.01"), rounding=STD_ROUNDING[mode])
    got = _d(value).round_to_prec(2, mode)
    print(f"[std-crosscheck] {value} {mode.value}: ours={got}, decimal={expected}")
    assert got == BigDecimal.from_decimal(expected)


def test_round_increment_factored_rule():
    print("[round_increment] half compare once; predicates only on ties / directed modes")
    assert round_increment(2, 5, 10, R.HALF_EVEN) == 0
    assert round_increment(3, 5, 10, R.HALF_EVEN) == 1
    assert round_increment(-3, 5, 10, R.HALF_EVEN) == 1
    assert round_increment(2, 51, 100, R.HALF_FLOOR) == 1
    assert round_increment(2, 49, 100, R.HALF_CEILING) == 0
    assert round_increment(-1, 1, 10, R.TRUNCATE) == 1
    assert round_increment(0, 9, 10, R.TRUNCATE) == 0
    assert R.HALF_TRUNCATE.is_half and not R.TRUNCATE.is_half


# -----------------------------
# Derived operations
# -----------------------------

def test_floor_ceiling_truncate():
    x = _d("-1.5")
    assert x.floor() == -2
    assert x.ceiling() == -1
    assert x.truncate() == -1
    assert _d("1.5").floor() == 1
    assert _d("1.5").ceiling() == 2


def test_fraction_parts():
    assert _d("-1.25").fraction() == _d("-0.25")
    assert _d("-1.25").ffraction() == _d("0.75")
    assert _d("3").fraction().is_zero()


def test_to_int_and_python_protocols():
    print("[to_int] mode-controlled integer conversion, plus round/int/math protocols")
    assert _d("2.5").to_int() == 2
    assert _d("2.5").to_int(R.HALF_AWAY_FROM_ZERO) == 3
    assert _d("1.23e10").to_int() == 12300000000
    assert isinstance(_d("1.23e10").to_int(), int)
    assert round(_d("2.5")) == 2
    assert isinstance(round(_d("2.5")), int)
    assert round(_d("2.675"), 2) == _d("2.68")
    assert isinstance(round(_d("2.675"), 2), BigDecimal)
    assert math.floor(_d("-0.5")) == -1
    assert math.ceil(_d("-0.5")) == 0
    assert math.trunc(_d("-0.5")) == 0
    assert int(_d("-7.9")) == -7


# -----------------------------
# Mantissas beyond the int/str digit limit
# -----------------------------

def test_round_huge_mantissa():
    print("[round_to_prec] 5001-digit integer part, 5000-digit fraction")
    big = 10 ** 5000 + 1
    x = BigDecimal.from_components(big * 10 ** 5000 + 5 * 10 ** 4999, -5000)  # big + 0.5
    assert x.round() == BigDecimal.from_int(big + 1)  # tie, big is odd
    assert x.floor() == BigDecimal.from_int(big)
    assert x.ceiling() == BigDecimal.from_int(big + 1)
    assert x.truncate() == BigDecimal.from_int(big)
    assert (-x).truncate() == BigDecimal.from_int(-big)
    assert x.to_int(R.HALF_FLOOR) == big
    assert round(x) == big + 1
    assert x.round_to_prec(2) == x
    tiny = BigDecimal.from_components(big, -10000)
    assert tiny.round_to_prec(5000) == BigDecimal.from_components(1, -5000)
    assert tiny.round_to_prec(4999) == 0
    assert tiny.round_to_prec(4999, R.CEILING) == BigDecimal.from_components(1, -4999)
