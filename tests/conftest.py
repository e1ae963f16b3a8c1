import os
import sys

os.environ.setdefault("MPLBACKEND", "Agg")

# reference products in the tests run to thousands of digits
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)
