# gdpforecast/data/loaders.py

from __future__ import annotations

from pathlib import Path

import pandas as pd

from gdpforecast.errors import ParseError
from .analysis_config import AnalysisConfig


def load_observations(
    path: str | Path | None = None,
    config: AnalysisConfig | None = None,
) -> pd.DataFrame:
    """
    Load the quarterly macro table from a local CSV.

    Expected header (order does not matter, extra columns are dropped):
        Date, GDP, GFCF, UNEM, ConsumerPrices, GovExp, HouseExp

    Returns a DataFrame with:
      - the date column as datetime64[ns]
      - every numeric column as float (blank cells -> NaN)
      - a RangeIndex, in file order (row 0 == data row 1)

    This function DOES NOT fill gaps or touch outliers; see
    gdpforecast.features.cleaning for that.
    """
    if config is None:
        config = AnalysisConfig()
    path = Path(path) if path is not None else config.data_path

    if not path.exists():
        raise FileNotFoundError(f"Input CSV not found: {path}")

    try:
        df = pd.read_csv(path)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise ParseError(f"{path} is not a readable CSV table: {e}") from e

    # Basic column sanity check
    date_col = config.date_column
    required = [date_col] + list(config.columns)
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ParseError(f"{path} missing columns: {missing}. Got {df.columns.tolist()}")

    df = df[required].copy()

    # Dates: strict format, no blanks
    try:
        df[date_col] = pd.to_datetime(df[date_col], format=config.date_format)
    except (ValueError, TypeError) as e:
        raise ParseError(
            f"Column '{date_col}' does not match date format {config.date_format!r}: {e}"
        ) from e
    if df[date_col].isna().any():
        row = int(df[date_col].isna().to_numpy().argmax()) + 1
        raise ParseError(f"Column '{date_col}' has an empty date at row {row}.")

    # Numerics: blanks stay NaN, any other text is an error
    for col in config.columns:
        raw = df[col]
        values = pd.to_numeric(raw, errors="coerce")
        bad = raw.notna() & values.isna()
        if bad.any():
            row = int(bad.to_numpy().argmax()) + 1
            raise ParseError(
                f"Column '{col}' has non-numeric value {raw[bad].iloc[0]!r} at row {row}."
            )
        df[col] = values.astype(float)

    # Rows are positional (outlier fixes refer to row numbers), so never re-sort
    if not df[date_col].is_monotonic_increasing:
        raise ParseError(f"Column '{date_col}' is not in chronological order.")

    df.reset_index(drop=True, inplace=True)
    return df
