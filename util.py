from errors import TransformOverflowError
from params import MAX_TRANSFORM_LENGTH

def is_power_of_2(x):
    return x > 0 and x & (x - 1) == 0

def next_power_of_2(x):
    return 1 if x <= 1 else 1 << (x - 1).bit_length()

def plan_transform_length(len_a, len_b, max_length=MAX_TRANSFORM_LENGTH):
    """
    Smallest power of two n with n >= len_a + len_b - 1.

    A shorter transform would fold high convolution terms onto low ones
    (cyclic wraparound) and corrupt the product without any error, so
    anything above `max_length` is rejected instead of truncated.
    """
    if len_a < 1 or len_b < 1:
        raise ValueError(f"operand lengths must be positive, got {len_a} and {len_b}")
    n = next_power_of_2(len_a + len_b - 1)
    if n > max_length:
        raise TransformOverflowError(
            f"operands of {len_a} and {len_b} digits need a transform of length {n}, "
            f"above the maximum {max_length}")
    return n
