import pytest

from errors import TransformOverflowError
from params import MAX_DIGITS, MAX_TRANSFORM_LENGTH
from util import is_power_of_2, next_power_of_2, plan_transform_length

def test_is_power_of_2():
    assert [x for x in range(20) if is_power_of_2(x)] == [1, 2, 4, 8, 16]

def test_next_power_of_2():
    assert [next_power_of_2(x) for x in (0, 1, 2, 3, 4, 5, 8, 9)] == [1, 1, 2, 4, 4, 8, 8, 16]

@pytest.mark.parametrize("len_a,len_b,n", [
    (1, 1, 1),
    (1, 2, 2),
    (3, 3, 8),
    (4, 4, 8),    # 7, one below a power of two
    (4, 5, 8),    # exactly 8
    (5, 5, 16),   # 9, one above
    (1000, 1, 1024),
])
def test_plan_transform_length(len_a, len_b, n):
    assert plan_transform_length(len_a, len_b) == n
    assert plan_transform_length(len_b, len_a) == n

def test_plan_largest_operands_fit():
    assert plan_transform_length(MAX_DIGITS, MAX_DIGITS) == MAX_TRANSFORM_LENGTH
    assert plan_transform_length(MAX_TRANSFORM_LENGTH, 1) == MAX_TRANSFORM_LENGTH

def test_plan_overflow():
    with pytest.raises(TransformOverflowError):
        plan_transform_length(MAX_DIGITS + 1, MAX_DIGITS + 1)
    with pytest.raises(TransformOverflowError):
        plan_transform_length(10, 10, max_length=16)

def test_plan_rejects_empty_operand():
    with pytest.raises(ValueError):
        plan_transform_length(0, 5)
