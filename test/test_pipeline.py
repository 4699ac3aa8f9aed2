# test/test_pipeline.py
"""
End-to-end checks on a synthetic 121-row quarterly table:
load -> clean -> 80/20 split -> OLS & random forest -> RMSE.
"""

import numpy as np
import pandas as pd
import pytest

from conftest import write_macro_csv
from gdpforecast.data.analysis_config import AnalysisConfig, RandomForestParams
from gdpforecast.features.cleaning import clean_observations
from gdpforecast.pipeline.run_gdp_forecast import main, run_holdout, run_walk_forward


@pytest.fixture
def config(macro_csv) -> AnalysisConfig:
    return AnalysisConfig(
        data_path=macro_csv,
        random_forest=RandomForestParams(n_estimators=100),
    )


def test_holdout_shapes(config):
    run = run_holdout(config=config)

    assert run.n_train == 96
    assert run.n_test == 25
    assert run.forecasts.columns.tolist() == ["actual", "ols", "random_forest"]
    assert len(run.forecasts) == 25
    assert run.forecasts.index[0] == pd.Timestamp("1990-01-01") + pd.DateOffset(months=3 * 96)
    assert run.forecasts.index.is_monotonic_increasing
    assert not run.forecasts.isna().any().any()
    assert list(run.ols_coefficients) == ["intercept", "GFCF", "GovExp", "HouseExp"]


def test_ols_beats_random_forest_on_trending_data(config):
    run = run_holdout(config=config)

    # the forest cannot predict above the training range
    assert run.rmse("ols") < run.rmse("random_forest")
    assert run.rmse("ols") >= 0.0
    assert run.metrics["ols"]["n_obs"] == 25


def test_holdout_is_reproducible(config):
    a = run_holdout(config=config)
    b = run_holdout(config=config)
    pd.testing.assert_frame_equal(a.forecasts, b.forecasts)


def test_walk_forward_one_row_per_test_position(config, raw_macro_frame):
    cleaned = clean_observations(raw_macro_frame, columns=config.columns)
    config.random_forest = RandomForestParams(n_estimators=20)

    res = run_walk_forward(cleaned, config)

    assert len(res) == 25
    assert res["train_size"].tolist() == list(range(96, 121))
    np.testing.assert_array_equal(res["actual"].to_numpy(), cleaned["GDP"].iloc[96:].to_numpy())


def test_walk_forward_skips_short_windows(config, raw_macro_frame, capsys):
    cleaned = clean_observations(raw_macro_frame, columns=config.columns)
    config.walk_forward_min_train_rows = 500

    res = run_walk_forward(cleaned, config)

    assert res.empty
    assert "Walk-forward" in capsys.readouterr().out


def _write_config(tmp_path, data_path):
    path = tmp_path / "analysis.yaml"
    path.write_text(
        f"dataset:\n  path: {data_path}\n"
        "random_forest:\n  n_estimators: 20\n",
        encoding="utf-8",
    )
    return path


def test_main_success(tmp_path, macro_csv, capsys):
    cfg_path = _write_config(tmp_path, macro_csv)

    assert main(["--config", str(cfg_path)]) == 0
    out = capsys.readouterr().out
    assert "RMSE (OLS)" in out
    assert "RMSE (Random Forest)" in out


def test_main_data_flag_overrides_config(tmp_path, macro_csv):
    cfg_path = _write_config(tmp_path, tmp_path / "does_not_exist.csv")
    assert main(["--config", str(cfg_path), "--data", str(macro_csv)]) == 0


def test_main_aborts_on_bad_input(tmp_path, raw_macro_frame, capsys):
    df = raw_macro_frame.copy()
    df["GDP"] = df["GDP"].astype(object)
    df.loc[0, "GDP"] = "n.a."
    bad = write_macro_csv(df, tmp_path / "bad.csv")
    cfg_path = _write_config(tmp_path, bad)

    assert main(["--config", str(cfg_path)]) == 1
    assert "❌" in capsys.readouterr().out


def test_main_aborts_on_empty_file(tmp_path, capsys):
    empty = tmp_path / "empty.csv"
    empty.write_text("", encoding="utf-8")
    cfg_path = _write_config(tmp_path, empty)

    assert main(["--config", str(cfg_path), "--data", str(empty)]) == 1
    assert "❌" in capsys.readouterr().out


def test_main_aborts_on_invalid_config(tmp_path, macro_csv, capsys):
    cfg_path = tmp_path / "analysis.yaml"
    cfg_path.write_text("split:\n  train_fraction: 1.5\n", encoding="utf-8")

    assert main(["--config", str(cfg_path), "--data", str(macro_csv)]) == 1
    assert "train_fraction" in capsys.readouterr().out
