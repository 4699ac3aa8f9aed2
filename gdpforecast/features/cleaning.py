# gdpforecast/features/cleaning.py

from __future__ import annotations

from typing import Mapping, Sequence

import pandas as pd

from gdpforecast.errors import ParseError, ShapeError

# Known bad cells in the quarterly macro table, 1-indexed data rows.
# Each listed cell is overwritten with the previous row's value for that field.
KNOWN_OUTLIERS: dict[str, list[int]] = {
    "GDP": [51],
    "GFCF": [71],
    "UNEM": [107],
    "ConsumerPrices": [87],
    "GovExp": [118],
    "HouseExp": [91],
}


def _value_columns(df: pd.DataFrame, columns: Sequence[str] | None) -> list[str]:
    if columns is None:
        return [c for c in df.columns if pd.api.types.is_numeric_dtype(df[c])]
    return list(columns)


def count_missing(df: pd.DataFrame, columns: Sequence[str] | None = None) -> int:
    """Number of NaN cells across the value columns."""
    cols = _value_columns(df, columns)
    return int(df[cols].isna().sum().sum())


def forward_fill(df: pd.DataFrame, columns: Sequence[str] | None = None) -> pd.DataFrame:
    """
    Last observation carried forward, per column.

    A gap in the first row has no prior value to copy and is rejected.
    """
    cols = _value_columns(df, columns)
    if df.empty:
        return df.copy()

    first_gaps = [c for c in cols if pd.isna(df[c].iloc[0])]
    if first_gaps:
        raise ParseError(
            f"First row has missing values in {first_gaps}; nothing to carry forward."
        )

    out = df.copy()
    out[cols] = out[cols].ffill()
    return out


def fix_known_outliers(
    df: pd.DataFrame,
    outliers: Mapping[str, Sequence[int]] = KNOWN_OUTLIERS,
) -> pd.DataFrame:
    """
    Overwrite each listed (field, row) cell with the value one row above.

    Rows are 1-indexed positions in the table, so row 51 is df.iloc[50]
    and takes the value of df.iloc[49].
    """
    out = df.copy()
    n = len(out)

    for col, rows in outliers.items():
        if col not in out.columns:
            raise ParseError(f"Outlier column '{col}' not found in table.")
        col_pos = out.columns.get_loc(col)
        for row in rows:
            if not 2 <= row <= n:
                raise ShapeError(
                    f"Outlier row {row} for '{col}' is outside rows 2..{n}."
                )
            out.iloc[row - 1, col_pos] = out.iloc[row - 2, col_pos]

    return out


def clean_observations(
    df: pd.DataFrame,
    columns: Sequence[str] | None = None,
    outliers: Mapping[str, Sequence[int]] = KNOWN_OUTLIERS,
) -> pd.DataFrame:
    """
    Forward-fill gaps, then patch the known outlier cells.

    Returns a new frame with the same shape and no missing values.
    """
    n_missing = count_missing(df, columns)
    filled = forward_fill(df, columns)
    cleaned = fix_known_outliers(filled, outliers)

    n_fixed = sum(len(rows) for rows in outliers.values())
    print(f"[Clean] Filled {n_missing} missing cells, patched {n_fixed} outlier cells.")
    return cleaned
