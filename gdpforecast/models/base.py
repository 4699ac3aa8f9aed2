# Abstract Model class
# gdpforecast/models/base.py

from abc import ABC, abstractmethod

import numpy as np

from gdpforecast.errors import FitError


class GDPForecastModel(ABC):
    """Base class for the GDP regressors compared in the holdout run."""

    @abstractmethod
    def fit(self, X: np.ndarray, y: np.ndarray):
        pass

    @abstractmethod
    def predict(self, X: np.ndarray) -> np.ndarray:
        pass

    @staticmethod
    def _check_training_data(X, y) -> tuple[np.ndarray, np.ndarray]:
        X = np.asarray(X, dtype=float)
        y = np.asarray(y, dtype=float)
        if X.ndim != 2:
            raise FitError(f"X must be 2-D, got shape {X.shape}.")
        if len(X) != len(y):
            raise FitError(f"X has {len(X)} rows but y has {len(y)}.")

        # intercept + one slope per predictor
        n_params = X.shape[1] + 1
        if len(y) < n_params:
            raise FitError(
                f"Need at least {n_params} training rows for {X.shape[1]} predictors, got {len(y)}."
            )
        return X, y
