import numpy as np
from sympy import factorint, isprime, ntheory

from params import MODULUS, PRIMITIVE_ROOT, MAX_TRANSFORM_EXPONENT

# Field operations over MODULUS. add/sub/mul accept Python ints or int64
# numpy arrays with entries in [0, MODULUS - 1]; products stay below 2^63.

def add_mod(x, y):
    return (x + y) % MODULUS

def sub_mod(x, y):
    return (x - y) % MODULUS

def mul_mod(x, y):
    return (x * y) % MODULUS

def pow_mod(base, exponent):
    """
    Square-and-multiply exponentiation modulo MODULUS.
    pow_mod(x, 0) is 1 for every x.
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    result = 1
    base = int(base) % MODULUS
    while exponent:
        if exponent & 1:
            result = mul_mod(result, base)
        base = mul_mod(base, base)
        exponent >>= 1
    return result

def inv_mod(x):
    # Fermat: x^(p-2) is the inverse of x for prime p
    if x % MODULUS == 0:
        raise ZeroDivisionError("0 has no inverse modulo MODULUS")
    return pow_mod(x, MODULUS - 2)

def max_transform_exponent(modulus=MODULUS):
    """
    Largest k such that 2^k divides modulus - 1, i.e. the longest
    power-of-two transform the field supports.
    """
    return factorint(modulus - 1).get(2, 0)

def check_field_params(modulus=MODULUS, root=PRIMITIVE_ROOT):
    if not isprime(modulus):
        raise ValueError(f"modulus {modulus} is not prime")
    if not ntheory.is_primitive_root(root, modulus):
        raise ValueError(f"{root} is not a primitive root modulo {modulus}")
    return True

def check_transform_capacity(max_exponent=MAX_TRANSFORM_EXPONENT, modulus=MODULUS, root=PRIMITIVE_ROOT):
    """
    Confirm the configured field admits transforms of length 2^max_exponent
    and no longer. Raises ValueError otherwise.
    """
    check_field_params(modulus, root)
    k = max_transform_exponent(modulus)
    if k != max_exponent:
        raise ValueError(f"modulus {modulus} supports transforms up to 2^{k}, configured for 2^{max_exponent}")
    return k

def get_root_of_unity(n, invert=False):
    """
    Returns the principal n'th root of unity g^((p-1)/n), or its inverse.
    """
    # We only handle `n` being a power of two that divides p - 1.
    assert n > 0 and n & (n - 1) == 0
    assert (MODULUS - 1) % n == 0
    root = inv_mod(PRIMITIVE_ROOT) if invert else PRIMITIVE_ROOT
    return pow_mod(root, (MODULUS - 1) // n)

def generate_twiddle_factors(n, omega):
    # Produces `n` twiddle factors omega^0 .. omega^(n-1)
    omegas = [1]
    for i in range(n-1):
        # Multiply (mod p) by the previous value.
        omegas.append(mul_mod(omegas[i], omega))

    return omegas

def stage_twiddles(wlen, half):
    """
    int64 array [wlen^0, wlen^1, ..., wlen^(half-1)] for one butterfly stage.
    `half` must be a power of two. The table doubles each round by
    multiplying the filled prefix with wlen^filled.
    """
    w = np.ones(half, dtype=np.int64)
    filled = 1
    step = wlen
    while filled < half:
        w[filled:2*filled] = mul_mod(w[:filled], step)
        step = mul_mod(step, step)
        filled <<= 1
    return w

if __name__ == "__main__":
    check_transform_capacity()
    k = max_transform_exponent()
    print(MODULUS, PRIMITIVE_ROOT, k, get_root_of_unity(1 << k))
