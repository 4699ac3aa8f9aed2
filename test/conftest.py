import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

# Ensure the repository root is on sys.path so tests can import the top-level
# `gdpforecast` package without an editable install.
ROOT = Path(__file__).resolve().parent.parent
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

COLUMNS = ["GDP", "GFCF", "UNEM", "ConsumerPrices", "GovExp", "HouseExp"]

# 1-indexed (column, row) cells that get a blank in the synthetic CSV
GAPS = [("GFCF", 10), ("UNEM", 30), ("HouseExp", 60), ("GDP", 100)]


def build_macro_frame(n: int = 121, seed: int = 0, with_defects: bool = True) -> pd.DataFrame:
    """
    Synthetic quarterly macro table with a strong linear trend.

    GDP is an exact linear function of GFCF / GovExp / HouseExp plus small
    noise, so OLS extrapolates into the test window and a random forest
    (bounded by the training range) cannot.
    """
    rng = np.random.default_rng(seed)
    t = np.arange(n, dtype=float)

    gfcf = 100 + 1.5 * t + rng.normal(0, 1.0, n)
    gov = 50 + 0.8 * t + rng.normal(0, 1.0, n)
    house = 200 + 2.0 * t + rng.normal(0, 1.0, n)
    df = pd.DataFrame({
        "Date": pd.date_range("1990-01-01", periods=n, freq="QS"),
        "GDP": 10 + 1.2 * gfcf + 0.9 * gov + 1.1 * house + rng.normal(0, 0.5, n),
        "GFCF": gfcf,
        "UNEM": 6 + np.sin(t / 8) + rng.normal(0, 0.1, n),
        "ConsumerPrices": 80 + 0.6 * t + rng.normal(0, 0.2, n),
        "GovExp": gov,
        "HouseExp": house,
    })

    if with_defects:
        for col, row in GAPS:
            if row <= n:
                df.loc[row - 1, col] = np.nan
        for col, rows in {"GDP": [51], "GFCF": [71], "UNEM": [107],
                          "ConsumerPrices": [87], "GovExp": [118], "HouseExp": [91]}.items():
            for row in rows:
                if row <= n:
                    df.loc[row - 1, col] = 1e6

    return df


def write_macro_csv(df: pd.DataFrame, path: Path) -> Path:
    out = df.copy()
    if pd.api.types.is_datetime64_any_dtype(out["Date"]):
        out["Date"] = out["Date"].dt.strftime("%Y-%m-%d")
    out.to_csv(path, index=False)
    return path


@pytest.fixture
def raw_macro_frame() -> pd.DataFrame:
    return build_macro_frame()


@pytest.fixture
def macro_csv(tmp_path, raw_macro_frame) -> Path:
    return write_macro_csv(raw_macro_frame, tmp_path / "macro_quarterly.csv")


@pytest.fixture(autouse=True)
def _no_data_path_env(monkeypatch):
    # A developer's .env must not leak into config tests
    monkeypatch.delenv("GDPFORECAST_DATA_PATH", raising=False)
