import pytest
from codec import decode, encode, max_value

def test_encode_leftmost_is_lsb():
    assert encode([1, 0, 1, 0, 0]) == 5
    assert encode([0, 0, 0, 0, 1]) == 16
    assert encode([1]) == 1

def test_decode_known_values():
    assert decode(5, 5) == [1, 0, 1, 0, 0]
    assert decode(0, 3) == [0, 0, 0]
    assert decode(16, 5) == [0, 0, 0, 0, 1]

def test_empty_generation():
    assert encode([]) == 0
    assert decode(0, 0) == []
    assert decode(7, 0) == []

def test_decode_ignores_high_bits():
    assert decode(0b11111, 3) == [1, 1, 1]

def test_wide_generation_is_exact():
    """Widths past 32/64 bits still encode every cell."""
    width = 100
    state = [0] * width
    state[31] = 1
    state[63] = 1
    state[99] = 1
    value = encode(state)
    assert value == (1 << 31) | (1 << 63) | (1 << 99)
    assert decode(value, width) == state

@pytest.mark.parametrize(
    "state",
    [
        [0, 1, 1, 0, 1],
        [1] * 31,
        [1] * 32,
        [1, 0] * 40,
    ],
)
def test_decode_inverts_encode(state):
    assert decode(encode(state), len(state)) == state

def test_max_value():
    assert max_value(0) == 0
    assert max_value(5) == 31
    assert encode([1] * 40) == max_value(40)

def test_negative_inputs_rejected():
    with pytest.raises(ValueError):
        decode(-1, 4)
    with pytest.raises(ValueError):
        decode(3, -1)
    with pytest.raises(ValueError):
        max_value(-2)
