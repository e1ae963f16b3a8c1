import argparse
import os
import pickle
import sys
import time

import numpy as np
import pandas as pd
from tqdm import tqdm

from bigmul import multiply
from params import DEFAULT_SEED, PICKLE_DIR
from plot_funcs import plot_sweep_timings
from util import plan_transform_length

def random_operand(rng, num_digits):
    # most significant digit is never zero so the length is exact
    digits = rng.integers(0, 10, size=num_digits)
    digits[0] = rng.integers(1, 10)
    return (digits + ord("0")).astype(np.uint8).tobytes().decode("ascii")

def reference_product(a, b):
    return str(int(a) * int(b))

def lift_int_str_limit():
    # CPython caps int <-> str conversion at 4300 digits by default
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)

def run_sweep(min_exp=4, max_exp=12, trials=3, seed=DEFAULT_SEED, check=True, save_pkl=False,
              pickle_dir=PICKLE_DIR, progress_print=False, debug=False):
    """
    Time `multiply` on random operands of 2^e digits for e in [min_exp, max_exp].

    Args:
        min_exp, max_exp: digit count exponents (inclusive)
        trials: random operand pairs per size
        seed: numpy random seed
        check: compare every product against Python's integer product
        save_pkl: pickle the results under `pickle_dir`
        progress_print: show a tqdm progress bar
        debug: pass through to `multiply`

    Returns:
        DataFrame with columns digits, n, trial, seconds, ok (ok is None when
        check is off)
    """
    if check:
        lift_int_str_limit()
    rng = np.random.default_rng(seed)
    configs = [(e, t) for e in range(min_exp, max_exp + 1) for t in range(trials)]

    rows = []
    for e, t in tqdm(configs, disable=not progress_print):
        num_digits = 1 << e
        a = random_operand(rng, num_digits)
        b = random_operand(rng, num_digits)

        start = time.perf_counter()
        product = multiply(a, b, debug=debug)
        seconds = time.perf_counter() - start

        ok = product == reference_product(a, b) if check else None
        if debug and ok is False:
            print(f"Mismatch at {num_digits} digits, trial {t}")
        rows.append({
            "digits": num_digits,
            "n": plan_transform_length(num_digits, num_digits),
            "trial": t,
            "seconds": seconds,
            "ok": ok,
        })

    df = pd.DataFrame(rows, columns=["digits", "n", "trial", "seconds", "ok"])

    if save_pkl:
        os.makedirs(pickle_dir, exist_ok=True)
        filepath = os.path.join(pickle_dir, f"sweep_e{min_exp}_{max_exp}.pkl")
        with open(filepath, 'wb') as f:
            pickle.dump(df, f)
        print(f"Saved results to {filepath}")

    return df

def boundary_lengths(max_exp):
    """
    Operand length pairs around each power of two 2^e, e in [1, max_exp]:
    len_a + len_b - 1 equal to 2^e - 1, exactly 2^e, and 2^e + 1.
    """
    pairs = []
    for e in range(1, max_exp + 1):
        half = 1 << (e - 1)
        pairs.append((half, half))
        pairs.append((half, half + 1))
        pairs.append((half + 1, half + 1))
    return pairs

def run_boundary(max_exp=10, seed=DEFAULT_SEED, progress_print=False):
    lift_int_str_limit()
    rng = np.random.default_rng(seed)

    rows = []
    for len_a, len_b in tqdm(boundary_lengths(max_exp), disable=not progress_print):
        a = random_operand(rng, len_a)
        b = random_operand(rng, len_b)
        rows.append({
            "len_a": len_a,
            "len_b": len_b,
            "n": plan_transform_length(len_a, len_b),
            "ok": multiply(a, b) == reference_product(a, b),
        })
    return pd.DataFrame(rows, columns=["len_a", "len_b", "n", "ok"])

def print_results(filepath):
    if not os.path.exists(filepath):
        print(f"Error: Pickle file {filepath} not found!")
        return None

    with open(filepath, 'rb') as f:
        df = pickle.load(f)

    print(f"\nSweep results from {filepath}:")
    print("=" * 60)
    summary = df.groupby(["digits", "n"])["seconds"].agg(["median", "min", "max"]).reset_index()
    print(summary.to_string(index=False))
    print("-" * 60)
    checked = df["ok"].dropna()
    print(f"Trials: {len(df)}, checked: {len(checked)}, mismatches: {int((checked == False).sum())}")
    return summary

def count_mismatches(df):
    return int((df["ok"].dropna() == False).sum())

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='NTT multiply sweep and differential check')
    parser.add_argument('--mode', choices=['sweep', 'boundary', 'print', 'plot'], default='sweep',
                        help='sweep (time random products), boundary (check lengths around powers of two), '
                             'print (summarize a saved sweep), plot (plot a saved sweep)')
    parser.add_argument('--min-exp', type=int, default=4, help='Smallest digit count exponent (2^e digits)')
    parser.add_argument('--max-exp', type=int, default=12, help='Largest digit count exponent (2^e digits)')
    parser.add_argument('--trials', type=int, default=3, help='Random operand pairs per size')
    parser.add_argument('--seed', type=int, default=DEFAULT_SEED, help='Random seed')
    parser.add_argument('--no-check', action='store_true', help='Skip comparison against the integer product')
    parser.add_argument('--save-pkl', action='store_true', help='Pickle sweep results')
    parser.add_argument('--pkl', type=str, default=None, help='Pickle file for print/plot modes')
    parser.add_argument('--out', type=str, default='sweep_timings.png', help='Plot output path')
    parser.add_argument('--debug', action='store_true', help='Print per-multiply diagnostics')

    args = parser.parse_args()
    pkl = args.pkl or os.path.join(PICKLE_DIR, f"sweep_e{args.min_exp}_{args.max_exp}.pkl")

    if args.mode == 'boundary':
        print(f"Running boundary check up to 2^{args.max_exp}...")
        df = run_boundary(args.max_exp, seed=args.seed, progress_print=True)
        print(df.to_string(index=False))
        sys.exit(1 if count_mismatches(df) else 0)
    elif args.mode == 'print':
        print_results(pkl)
    elif args.mode == 'plot':
        if not os.path.exists(pkl):
            print(f"Error: Pickle file {pkl} not found!")
            sys.exit(1)
        with open(pkl, 'rb') as f:
            plot_sweep_timings(pickle.load(f), args.out)
    else:
        print(f"Running sweep for 2^{args.min_exp}..2^{args.max_exp} digits, {args.trials} trials each")
        df = run_sweep(args.min_exp, args.max_exp, args.trials, seed=args.seed, check=not args.no_check,
                       save_pkl=args.save_pkl, progress_print=True, debug=args.debug)
        print(df.groupby("digits")["seconds"].median().to_string())
        mismatches = count_mismatches(df)
        if mismatches:
            print(f"{mismatches} products did not match the integer reference")
        sys.exit(1 if mismatches else 0)
