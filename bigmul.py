import argparse
import re
import sys

import numpy as np

from errors import BigMulError, MalformedInputError, InputTooLargeError, TransformOverflowError
from ntt import ntt_inplace
from ntt_utility import mul_mod
from params import MODULUS, DIGIT_BASE, MAX_DIGIT, MAX_DIGITS
from util import is_power_of_2, plan_transform_length

DIGITS_RE = re.compile(r"[0-9]+")

def parse_operands(text):
    """Split input text into the two operand tokens. Extra tokens are ignored."""
    tokens = text.split()
    if len(tokens) < 2:
        raise MalformedInputError(f"expected two operands, got {len(tokens)}")
    return tokens[0], tokens[1]

def parse_digits(token, max_digits=MAX_DIGITS):
    """
    Validate one operand and return its canonical digit string (leading
    zeros removed, at least one digit kept).
    """
    if not DIGITS_RE.fullmatch(token):
        raise MalformedInputError(f"operand is not a decimal digit string: {token[:20]!r}")
    if len(token) > max_digits:
        raise InputTooLargeError(f"operand has {len(token)} digits, maximum is {max_digits}")
    return token.lstrip("0") or "0"

def is_zero(digits):
    return digits == "0"

def load_digits(digits, n):
    # little-endian: buf[0] is the least significant digit
    if len(digits) > n:
        raise ValueError(f"{len(digits)} digits do not fit a buffer of length {n}")
    buf = np.zeros(n, dtype=np.int64)
    values = np.frombuffer(digits.encode("ascii"), dtype=np.uint8).astype(np.int64) - ord("0")
    buf[:len(digits)] = values[::-1]
    return buf

def convolve(a, b, n):
    """
    Digit convolution of `a` and `b` through a length-n transform.

    Returns n Python ints; entry i is sum(a_j * b_(i-j)) over little-endian
    digits, exact because n covers the full convolution and every sum stays
    below MODULUS.
    """
    len_a, len_b = len(a), len(b)
    if not is_power_of_2(n):
        raise ValueError(f"transform length must be a power of two, got {n}")
    if n < len_a + len_b - 1:
        raise ValueError(f"transform length {n} is below {len_a + len_b - 1}; the convolution would wrap around")
    if MAX_DIGIT * MAX_DIGIT * min(len_a, len_b) >= MODULUS:
        raise TransformOverflowError(f"coefficients of a {len_a}x{len_b} digit product can reach the modulus")

    fa = ntt_inplace(load_digits(a, n))
    fb = ntt_inplace(load_digits(b, n))
    product = ntt_inplace(mul_mod(fa, fb), invert=True)
    return product.tolist()

def trim_digits(digits):
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return digits

def carry_normalize(coefficients):
    """Turn convolution coefficients into little-endian base-10 digits."""
    digits = []
    carry = 0
    for c in coefficients:
        value = c + carry
        carry, digit = divmod(value, DIGIT_BASE)
        digits.append(digit)
    while carry:
        carry, digit = divmod(carry, DIGIT_BASE)
        digits.append(digit)
    if not digits:
        digits.append(0)
    return trim_digits(digits)

def format_digits(digits):
    return "".join(map(str, reversed(digits)))

def multiply(a, b, max_digits=MAX_DIGITS, debug=False):
    """
    Product of two non-negative decimal digit strings, as a decimal string.

    Raises MalformedInputError, InputTooLargeError or TransformOverflowError.
    """
    a = parse_digits(a, max_digits)
    b = parse_digits(b, max_digits)
    if is_zero(a) or is_zero(b):
        if debug:
            print("zero operand, skipping transform", file=sys.stderr)
        return "0"

    n = plan_transform_length(len(a), len(b))
    if debug:
        print(f"len_a={len(a)} len_b={len(b)} n={n} stages={n.bit_length() - 1}", file=sys.stderr)

    coefficients = convolve(a, b, n)
    return format_digits(carry_normalize(coefficients))

def decode_input(data):
    if isinstance(data, str):
        return data
    try:
        return data.decode("ascii")
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"input is not ASCII text: byte {data[e.start]:#04x} at offset {e.start}") from e

def multiply_text(text, max_digits=MAX_DIGITS, debug=False):
    """Multiply the first two operands of `text` (str, or bytes holding ASCII)."""
    a, b = parse_operands(decode_input(text))
    return multiply(a, b, max_digits=max_digits, debug=debug)

def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Multiply two non-negative decimal integers read from standard input')
    parser.parse_args(argv)

    try:
        product = multiply_text(sys.stdin.buffer.read(), max_digits=MAX_DIGITS)
    except BigMulError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(product)
    return 0

if __name__ == "__main__":
    sys.exit(main())
