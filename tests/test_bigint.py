import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.bigint import BigInt, MultiplyMethod

medium = st.integers(min_value=-(10**200), max_value=10**200)


def test_zero_has_no_digits():
    zero = BigInt(0)
    assert len(zero) == 0
    assert str(zero) == "0"
    assert zero.sign == 1


def test_digits_are_little_endian_base_10000():
    assert BigInt(123456789).digits == (6789, 2345, 1)


def test_inner_digits_are_zero_padded():
    assert str(BigInt(10001)) == "10001"
    assert str(BigInt(-5)) == "-5"


def test_repr():
    assert repr(BigInt(-42)) == "BigInt(-42)"


def test_negated_zero_equals_zero():
    assert -BigInt(0) == BigInt(0)
    assert str(-BigInt(0)) == "0"


def test_source_example_product():
    a = BigInt(20080000004100)
    b = BigInt(30040000000007000)
    ia, ib = 20080000004100, 30040000000007000
    for _ in range(4):
        a = a * a
        b = b * b
        ia, ib = ia * ia, ib * ib
    assert int(a * b) == ia * ib
    assert str(a * b) == str(ia * ib)


@given(medium)
def test_int_round_trip(value):
    assert int(BigInt(value)) == value


@given(medium)
def test_str_and_parse_round_trip(value):
    assert str(BigInt(value)) == str(value)
    assert BigInt.parse(str(value)) == BigInt(value)


@given(medium, medium)
def test_addition_matches_int(a, b):
    assert int(BigInt(a) + BigInt(b)) == a + b
    assert int(BigInt(a) + b) == a + b
    assert int(a + BigInt(b)) == a + b


@given(medium, medium)
def test_subtraction_matches_int(a, b):
    assert int(BigInt(a) - BigInt(b)) == a - b
    assert int(a - BigInt(b)) == a - b


@given(medium, medium)
def test_multiplication_methods_agree(a, b):
    fft_result = BigInt(a).multiply(b, MultiplyMethod.FFT)
    kara_result = BigInt(a).multiply(b, MultiplyMethod.KARATSUBA)
    assert int(fft_result) == a * b
    assert kara_result == fft_result


@given(medium, medium)
def test_ordering_matches_int(a, b):
    x, y = BigInt(a), BigInt(b)
    assert (x < y) == (a < b)
    assert (x <= y) == (a <= b)
    assert (x > y) == (a > b)
    assert (x >= y) == (a >= b)
    assert (x == y) == (a == b)


@given(medium)
def test_hash_consistent_with_int(value):
    assert hash(BigInt(value)) == hash(value)
    assert BigInt(value) == value


@given(medium)
def test_self_subtraction_is_zero(value):
    result = BigInt(value) - BigInt(value)
    assert len(result) == 0
    assert result.sign == 1


def test_parse_accepts_sign_and_leading_zeros():
    assert BigInt.parse("+000123") == BigInt(123)
    assert BigInt.parse("-0") == BigInt(0)


@pytest.mark.parametrize("text", ["", "abc", "12a", "--1", "1.5"])
def test_parse_rejects_garbage(text):
    with pytest.raises(ValueError):
        BigInt.parse(text)


def test_constructor_rejects_other_types():
    with pytest.raises(TypeError):
        BigInt("12")


def test_multiply_rejects_unknown_method():
    with pytest.raises(ValueError):
        BigInt(3).multiply(4, "schoolbook")


def test_copy_constructor_is_independent():
    original = BigInt(987654321)
    copy = BigInt(original)
    assert copy == original
    assert copy.digits == original.digits


def test_multiply_by_zero():
    assert BigInt(12345).multiply(0) == BigInt(0)
    assert BigInt(-7) * 0 == 0