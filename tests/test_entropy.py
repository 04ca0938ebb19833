import pytest

from utilkit.entropy import MAX_RANDOM_BYTES, get_random_bytes


@pytest.mark.parametrize("length", [0, 1, 16, 255, 256])
def test_length(length):
    data = get_random_bytes(length)
    assert isinstance(data, bytes)
    assert len(data) == length


def test_limit_constant():
    assert len(get_random_bytes(MAX_RANDOM_BYTES)) == 256


def test_too_many_bytes():
    with pytest.raises(OverflowError):
        get_random_bytes(257)


def test_negative_length():
    with pytest.raises(ValueError):
        get_random_bytes(-1)


def test_outputs_differ():
    outputs = [get_random_bytes(32) for _ in range(8)]
    assert len(set(outputs)) == 8


def test_bytes_spread():
    data = get_random_bytes(256)
    assert len(set(data)) > 64