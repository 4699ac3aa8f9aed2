# gdpforecast/evaluation.py

import numpy as np
import pandas as pd
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score

from gdpforecast.errors import ShapeError


def _aligned(actual, predicted) -> tuple[np.ndarray, np.ndarray]:
    g = np.asarray(actual, dtype=float).ravel()
    p = np.asarray(predicted, dtype=float).ravel()
    if len(g) != len(p):
        raise ShapeError(f"Predictions ({len(p)}) and ground truth ({len(g)}) differ in length.")
    if len(g) == 0:
        raise ShapeError("Cannot evaluate an empty forecast.")
    return g, p


def rmse(actual, predicted) -> float:
    """Root-mean-square error: sqrt(mean((G_i - P_i)^2))."""
    g, p = _aligned(actual, predicted)
    return float(np.sqrt(mean_squared_error(g, p)))


def compute_metrics(actual, predicted) -> dict:
    g, p = _aligned(actual, predicted)
    err = p - g
    return {
        "n_obs": len(g),
        "rmse": float(np.sqrt(mean_squared_error(g, p))),
        "mae": float(mean_absolute_error(g, p)),
        "bias": float(np.mean(err)),
        # r2 is undefined for a single sample
        "r2": float(r2_score(g, p)) if len(g) >= 2 else np.nan,
    }


def evaluate_and_print(df: pd.DataFrame,
                       pred_col: str,
                       actual_col: str = "actual",
                       label: str = "Model") -> dict:
    """
    Compute metrics for one prediction column and print a short report.

    Args:
        df: forecast frame indexed by date, holding predictions and actuals
        pred_col: prediction column (e.g. 'ols')
        actual_col: ground-truth column (e.g. 'actual')
        label: report title

    Returns:
        dict: n_obs, rmse, mae, bias, r2
    """
    metrics = compute_metrics(df[actual_col], df[pred_col])

    print("-" * 60)
    print(f"📊 EVALUATION REPORT: {label}")
    print("-" * 60)
    print(f"   Samples       : {metrics['n_obs']}")
    print(f"   RMSE          : {metrics['rmse']:.4f}")
    print(f"   MAE           : {metrics['mae']:.4f}")
    print(f"   Bias          : {metrics['bias']:+.4f}  (Pred - Actual)")
    print(f"   R² Score      : {metrics['r2']:.4f}")
    print("-" * 60)

    # Largest misses help spot regime breaks in the test window
    errors = (df[pred_col] - df[actual_col]).to_numpy(dtype=float)
    top_pos = np.argsort(-np.abs(errors), kind="stable")[:3]

    print("   [Top 3 Largest Errors]")
    for pos in top_pos:
        idx = df.index[pos]
        when = idx.date() if hasattr(idx, "date") else idx
        print(f"   {when}: Pred={df[pred_col].iloc[pos]:.2f}, "
              f"Act={df[actual_col].iloc[pos]:.2f}, Err={errors[pos]:.2f}")
    print("\n")

    return metrics
