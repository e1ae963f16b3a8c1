import numpy as np

from errors import TransformOverflowError
from ntt_utility import (add_mod, sub_mod, mul_mod, pow_mod, inv_mod, check_transform_capacity,
                         generate_twiddle_factors, stage_twiddles)
from params import MODULUS, PRIMITIVE_ROOT, MAX_TRANSFORM_LENGTH
from util import is_power_of_2

# field must be prime with primitive root PRIMITIVE_ROOT and admit 2^MAX_TRANSFORM_EXPONENT
check_transform_capacity()

def ntt(a, omega):
    # Direct O(n^2) evaluation X_i = sum_j a_j * omega^(i*j); reference only.
    n = len(a)
    omegas = generate_twiddle_factors(n, omega)
    out = [0] * n

    for i in range(n):
        for j in range(n):
            out[i] = add_mod(out[i], mul_mod(a[j], omegas[(i * j) % n]))
    return out

def build_rev_table(n):
    """
    Bit-reversal table for a transform of length n = 2^k: entry i holds i
    with its k low bits reversed.
    """
    n = int(n)
    if not is_power_of_2(n):
        raise ValueError(f"transform length must be a power of two, got {n}")
    bits = n.bit_length() - 1
    idx = np.arange(n, dtype=np.int64)
    rev = np.zeros(n, dtype=np.int64)
    for b in range(bits):
        rev |= ((idx >> b) & 1) << (bits - 1 - b)
    return rev

def bit_rev_shuffle(values):
    # swap i and rev(i) once per pair
    out = list(values)
    for i, rev_i in enumerate(build_rev_table(len(values)).tolist()):
        if rev_i > i:
            out[i], out[rev_i] = out[rev_i], out[i]
    return out

def _check_length(n):
    if not is_power_of_2(n):
        raise ValueError(f"transform length must be a power of two, got {n}")
    if n > MAX_TRANSFORM_LENGTH:
        raise TransformOverflowError(
            f"transform length {n} exceeds the maximum {MAX_TRANSFORM_LENGTH} supported by the modulus")

def ntt_dit_rn(a, invert=False):
    """
    Iterative radix-2 decimation-in-time transform on a list of field
    elements (bit-reversed input, natural-order output). Returns a new list.

    This is the scalar model of `ntt_inplace`: one butterfly at a time with
    a running twiddle.
    """
    n = len(a)
    _check_length(n)
    out = bit_rev_shuffle(a)
    root = inv_mod(PRIMITIVE_ROOT) if invert else PRIMITIVE_ROOT

    M = 2
    while M <= n:
        half = M >> 1
        wlen = pow_mod(root, (MODULUS - 1) // M)
        for i in range(0, n, M):
            w = 1
            for j in range(half):
                U = out[i + j]
                V = mul_mod(out[i + j + half], w)

                out[i + j] = add_mod(U, V)
                out[i + j + half] = sub_mod(U, V)
                w = mul_mod(w, wlen)
        M <<= 1

    if invert:
        n_inv = inv_mod(n)
        out = [mul_mod(x, n_inv) for x in out]
    return out

def ntt_inplace(buf, invert=False):
    """
    Forward (or inverse) NTT of an int64 buffer, in place. Returns `buf`.

    Same schedule as `ntt_dit_rn`, but every stage runs its butterflies for
    all blocks at once on a (n/len, len) view of the buffer. The inverse
    transform scales by n^-1 so that a forward/inverse pair is the identity.
    """
    if not isinstance(buf, np.ndarray) or buf.ndim != 1:
        raise ValueError("transform buffer must be a 1-D numpy array")
    if buf.dtype != np.int64:
        raise ValueError(f"transform buffer must be int64, got {buf.dtype}")
    if not buf.flags.c_contiguous:
        raise ValueError("transform buffer must be contiguous")
    n = len(buf)
    _check_length(n)

    # bit reversal is an involution, so one gather performs every swap
    buf[:] = buf[build_rev_table(n)]

    root = inv_mod(PRIMITIVE_ROOT) if invert else PRIMITIVE_ROOT
    length = 2
    while length <= n:
        half = length >> 1
        wlen = pow_mod(root, (MODULUS - 1) // length)
        w = stage_twiddles(wlen, half)

        blocks = buf.reshape(-1, length)
        u = blocks[:, :half].copy()
        v = mul_mod(blocks[:, half:], w)
        blocks[:, :half] = add_mod(u, v)
        blocks[:, half:] = sub_mod(u, v)
        length <<= 1

    if invert:
        buf[:] = mul_mod(buf, inv_mod(n))
    return buf
