class BigMulError(ValueError):
    """Base class for failures reported by the multiplier."""


class MalformedInputError(BigMulError):
    """Fewer than two operands, or an operand that is not a run of decimal digits."""


class InputTooLargeError(BigMulError):
    """An operand has more digits than the configured maximum."""


class TransformOverflowError(BigMulError):
    """The convolution does not fit the largest transform the modulus admits."""
