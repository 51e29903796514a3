#!/usr/bin/env python3
"""
Generate a PNG chart of monthly accident counts, one line per year.
Usage: plot_monthly_totals.py 2013 2014 2015  (writes monthly_totals.png)
"""
import sys

import matplotlib.pyplot as plt
from fars import summarize_years


def main(years):
    matrix = summarize_years(years)
    if matrix.empty:
        raise SystemExit("No accident files could be loaded for %s" % ", ".join(years))

    fig, ax = plt.subplots(figsize=(8, 4))
    for year in matrix.columns.drop("MONTH"):
        ax.plot(matrix["MONTH"], matrix[year].astype("float"), "-o", label=str(year))

    ax.set_xlabel("Month")
    ax.set_ylabel("Accidents")
    ax.set_xticks(range(1, 13))
    ax.legend()
    fig.tight_layout()
    fig.savefig("monthly_totals.png")
    print("Saved monthly_totals.png")


if __name__ == "__main__":
    main(sys.argv[1:])
