import pytest

from vexengine.core import EngineError, bit, vex_assert


def test_vex_assert_passes_on_truthy():
    assert vex_assert(True, "never raised") is None


def test_vex_assert_raises_with_message():
    with pytest.raises(EngineError, match="Shader not found!"):
        vex_assert(False, "Shader not found!")


@pytest.mark.parametrize("falsy", [0, "", None, [], {}])
def test_vex_assert_raises_on_any_falsy(falsy):
    with pytest.raises(EngineError):
        vex_assert(falsy, "falsy")


def test_bit_zero_is_one():
    assert bit(0) == 1


@pytest.mark.parametrize("n", range(8))
def test_bit_has_single_bit_set(n):
    value = bit(n)
    assert value.bit_count() == 1 if hasattr(value, "bit_count") else bin(value).count("1") == 1
    assert value.bit_length() == n + 1


def test_bits_are_distinct_and_doubling():
    values = [bit(n) for n in range(6)]
    assert len(set(values)) == 6
    assert all(b == 2 * a for a, b in zip(values, values[1:]))


def test_bit_negative_rejected():
    with pytest.raises(ValueError):
        bit(-1)