# gdpforecast/pipeline/run_gdp_forecast.py

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd
from tqdm import tqdm

from gdpforecast.data.analysis_config import AnalysisConfig, load_analysis_config
from gdpforecast.data.loaders import load_observations
from gdpforecast.errors import GDPForecastError
from gdpforecast.evaluation import compute_metrics, evaluate_and_print
from gdpforecast.features.cleaning import clean_observations
from gdpforecast.features.split import chronological_split, split_index
from gdpforecast.models.ols import GDPForecasterOLS
from gdpforecast.models.random_forest import GDPForecasterRF

MODEL_COLUMNS = ["ols", "random_forest"]


@dataclass
class ForecastRun:
    n_train: int
    n_test: int
    forecasts: pd.DataFrame                 # index: date; cols: actual, ols, random_forest
    metrics: dict[str, dict] = field(default_factory=dict)
    ols_coefficients: dict[str, float] = field(default_factory=dict)

    def rmse(self, model: str) -> float:
        return self.metrics[model]["rmse"]


def _build_models(config: AnalysisConfig) -> tuple[GDPForecasterOLS, GDPForecasterRF]:
    return GDPForecasterOLS(feature_names=config.features), GDPForecasterRF(config.random_forest)


def load_clean_table(data_path: str | Path | None, config: AnalysisConfig) -> pd.DataFrame:
    df = load_observations(data_path, config)
    print(f"[Load] {len(df)} rows, {df[config.date_column].min().date()} → "
          f"{df[config.date_column].max().date()}")
    return clean_observations(df, columns=config.columns)


def run_holdout(data_path: str | Path | None = None,
                config: AnalysisConfig | None = None,
                cleaned: pd.DataFrame | None = None) -> ForecastRun:
    """
    Load → clean → 80/20 chronological split → fit OLS and RF → RMSE on test.
    """
    if config is None:
        config = load_analysis_config()
    if cleaned is None:
        cleaned = load_clean_table(data_path, config)

    train, test = chronological_split(cleaned, config.train_fraction)
    print(f"[Split] train={len(train)} rows, test={len(test)} rows "
          f"(test starts {test[config.date_column].iloc[0].date()})")

    X_train = train[config.features].to_numpy()
    y_train = train[config.target].to_numpy()
    X_test = test[config.features].to_numpy()

    ols, rf = _build_models(config)
    ols.fit(X_train, y_train)
    rf.fit(X_train, y_train)

    forecasts = pd.DataFrame(
        {
            "actual": test[config.target].to_numpy(),
            "ols": ols.predict(X_test),
            "random_forest": rf.predict(X_test),
        },
        index=pd.DatetimeIndex(test[config.date_column], name="date"),
    )

    metrics = {
        "ols": evaluate_and_print(forecasts, "ols", label="OLS"),
        "random_forest": evaluate_and_print(forecasts, "random_forest", label="Random Forest"),
    }
    coefs = ols.coefficients()

    print("[OLS] " + ", ".join(f"{k}={v:.4f}" for k, v in coefs.items()))
    print(f"RMSE (OLS)           : {metrics['ols']['rmse']:.4f}")
    print(f"RMSE (Random Forest) : {metrics['random_forest']['rmse']:.4f}")

    return ForecastRun(
        n_train=len(train),
        n_test=len(test),
        forecasts=forecasts,
        metrics=metrics,
        ols_coefficients=coefs,
    )


def run_walk_forward(cleaned: pd.DataFrame, config: AnalysisConfig | None = None) -> pd.DataFrame:
    """
    Expanding-window re-estimation over the test segment.

    For each test position t, both models are refit on rows [0, t) and
    predict row t. Steps with fewer than walk_forward_min_train_rows
    training rows are skipped.
    """
    if config is None:
        config = load_analysis_config()

    n = len(cleaned)
    start = split_index(n, config.train_fraction)
    X_all = cleaned[config.features].to_numpy()
    y_all = cleaned[config.target].to_numpy()
    dates = cleaned[config.date_column].to_numpy()

    results = []
    for t in tqdm(range(start, n), desc="walk-forward"):
        if t < config.walk_forward_min_train_rows:
            continue

        ols, rf = _build_models(config)
        ols.fit(X_all[:t], y_all[:t])
        rf.fit(X_all[:t], y_all[:t])
        x_t = X_all[t:t + 1]

        results.append({
            "date": dates[t],
            "actual": y_all[t],
            "ols": ols.predict(x_t)[0],
            "random_forest": rf.predict(x_t)[0],
            "train_size": t,
        })

    if not results:
        print(f"⚠️ Walk-forward: no step had {config.walk_forward_min_train_rows}+ training rows.")
        return pd.DataFrame(columns=["actual", *MODEL_COLUMNS, "train_size"],
                            index=pd.DatetimeIndex([], name="date"))

    df_res = pd.DataFrame(results).set_index("date")
    df_res.index = pd.DatetimeIndex(df_res.index, name="date")

    for col in MODEL_COLUMNS:
        m = compute_metrics(df_res["actual"], df_res[col])
        print(f"[Walk-forward] {col:<14} steps={m['n_obs']}  RMSE={m['rmse']:.4f}  "
              f"MAE={m['mae']:.4f}  Bias={m['bias']:+.4f}")
    return df_res


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        description="Compare OLS and random-forest GDP forecasts on a chronological holdout."
    )
    ap.add_argument("--data", default=None, help="input CSV (overrides config / GDPFORECAST_DATA_PATH)")
    ap.add_argument("--config", default=None, help="analysis YAML (default: bundled analysis.yaml)")
    ap.add_argument("--walk-forward", action="store_true",
                    help="also run the expanding-window backtest over the test segment")
    args = ap.parse_args(argv)

    print("🚀 GDP forecast comparison: OLS vs Random Forest")
    try:
        config = load_analysis_config(args.config)
        cleaned = load_clean_table(args.data, config)
        run = run_holdout(config=config, cleaned=cleaned)
        if args.walk_forward:
            run_walk_forward(cleaned, config)
    # ValueError: config validation in AnalysisConfig
    except (GDPForecastError, FileNotFoundError, ValueError) as e:
        print(f"❌ Run aborted: {e}")
        return 1

    better = min(MODEL_COLUMNS, key=run.rmse)
    print(f"✅ Done. Lower test RMSE: {better}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
