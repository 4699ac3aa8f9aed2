# gdpforecast/features/split.py

from __future__ import annotations

from fractions import Fraction

import pandas as pd

from gdpforecast.errors import ShapeError


def split_index(n: int, train_fraction: float = 0.8) -> int:
    """
    floor(train_fraction * n) in exact rational arithmetic.

    Plain float products can land just under an integer for some
    fractions (0.57 * 100 == 56.99999999999999), which would move the
    boundary by one row.
    """
    return int(Fraction(str(train_fraction)) * n)


def chronological_split(
    df: pd.DataFrame,
    train_fraction: float = 0.8,
) -> tuple[pd.DataFrame, pd.DataFrame]:
    """
    Positional train/test split for forecast evaluation.

    Train = rows [0, k), test = rows [k, N) with k = floor(train_fraction * N).
    No shuffling: every training row precedes every test row.
    """
    n = len(df)
    if n < 2:
        raise ShapeError(f"Need at least 2 rows to split, got {n}.")

    k = split_index(n, train_fraction)
    if k == 0 or k == n:
        raise ShapeError(
            f"Split of {n} rows at fraction {train_fraction} leaves an empty segment."
        )

    return df.iloc[:k].copy(), df.iloc[k:].copy()
