import pytest

from bigdecimal.core.decimals import BigDecimal, ZERO
from bigdecimal.core.exc import DecimalDomainError
from bigdecimal.core.ordering import compare, min_of, max_of, sum_of
from bigdecimal.core.parse import decimal


def _d(x) -> BigDecimal:
    return decimal(x)


def test_compare_is_value_based():
    print("[compare] different encodings of the same value compare equal")
    assert compare(BigDecimal(10, -1), 1) == 0
    assert compare(_d("-0.001"), ZERO) == -1
    assert compare(_d("1e7"), _d("9999999.999")) == 1


@pytest.mark.parametrize(
    "x,y",
    [("1", "2"), ("-1", "-2"), ("0.1", "0.10"), ("1e20", "1e-20"), ("-3.5", "3.5")],
)
def test_exactly_one_relation_holds(x, y):
    a, b = _d(x), _d(y)
    relations = [a < b, a == b, a > b]
    print(f"[trichotomy] {x} vs {y}: {relations}")
    assert relations.count(True) == 1
    assert compare(a, b) == (float(a) > float(b)) - (float(a) < float(b))


def test_min_max_varargs_and_iterable():
    xs = [_d("2.5"), _d("-1"), _d("7"), _d("-1.0")]
    assert min_of(*xs) == -1
    assert max_of(xs) == 7
    assert min_of(3, _d("2.9")) == _d("2.9")
    # Stable: the first of equal candidates is kept.
    assert min_of(xs) is xs[1]
    with pytest.raises(DecimalDomainError):
        min_of([])
    with pytest.raises(DecimalDomainError):
        max_of()


def test_sum_of_exact_and_empty():
    print("[sum_of] empty -> canonical zero; ten 0.1s -> exactly 1")
    z = sum_of([])
    assert (z.num, z.exp) == (0, 0)
    assert sum_of([_d("0.1")] * 10) == 1
    assert sum_of([1, _d("0.5"), -2]) == _d("-0.5")
    assert sum_of(_d(f"1e-{k}") for k in range(1, 4)) == _d("0.111")


def test_aggregates_reject_unsupported_values():
    with pytest.raises(DecimalDomainError):
        sum_of([_d("1"), 0.5])
    with pytest.raises(DecimalDomainError):
        compare("1", _d("1"))
