# field parameters
MODULUS = 998244353 # 119 * 2^23 + 1
PRIMITIVE_ROOT = 3

# p - 1 = 119 * 2^23, so transforms of length up to 2^23 exist
MAX_TRANSFORM_EXPONENT = 23
MAX_TRANSFORM_LENGTH = 1 << MAX_TRANSFORM_EXPONENT

# digits
DIGIT_BASE = 10
MAX_DIGIT = DIGIT_BASE - 1

# per-operand ceiling; keeps len_a + len_b - 1 below MAX_TRANSFORM_LENGTH
# and every coefficient (<= 81 * min(len_a, len_b)) below MODULUS
MAX_DIGITS = 1 << 22

# sweeps
DEFAULT_SEED = 0
PICKLE_DIR = "pickle_results"
