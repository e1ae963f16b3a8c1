import matplotlib.pyplot as plt
import numpy as np

def plot_sweep_timings(df, filename="sweep_timings.png", title=None):
    """
    Log-log plot of multiply time against operand size.

    Args:
        df: sweep results with `digits` and `seconds` columns
        filename: output image path
        title: optional plot title
    """
    if df.empty:
        print("No sweep results to plot")
        return None

    medians = df.groupby("digits")["seconds"].median()

    plt.figure(figsize=(7, 5))

    # every trial, then the median per size
    plt.scatter(df["digits"], df["seconds"], alpha=0.5, s=30, color='lightblue', label='Trials')
    plt.plot(medians.index, medians.values, marker='o', color='red', label='Median')

    # n log n guide through the smallest median
    x0 = medians.index[0]
    y0 = medians.values[0]
    xs = np.array(medians.index, dtype=float)
    guide = y0 * (xs * np.log2(np.maximum(xs, 2))) / (x0 * np.log2(max(x0, 2)))
    plt.plot(xs, guide, linestyle='--', color='gray', label='n log n')

    plt.xscale('log', base=2)
    plt.yscale('log')
    plt.xlabel('Digits per operand')
    plt.ylabel('Seconds')
    plt.title(title or 'NTT multiply time')
    plt.grid(True, which='both', alpha=0.3)
    plt.legend()
    plt.tight_layout()
    plt.savefig(filename, dpi=150)
    plt.close()
    print(f"Saved plot to {filename}")
    return filename
