# gdpforecast/models/ols.py

from __future__ import annotations

from typing import Sequence

import numpy as np
from sklearn.exceptions import NotFittedError
from sklearn.linear_model import LinearRegression
from sklearn.utils.validation import check_is_fitted

from gdpforecast.errors import FitError
from .base import GDPForecastModel


class GDPForecasterOLS(GDPForecastModel):
    def __init__(self, feature_names: Sequence[str] | None = None):
        """
        Ordinary Least Squares: GDP = b0 + b1*GFCF + b2*GovExp + b3*HouseExp.

        No scaling and no regularization, so the fitted coefficients are
        the plain least-squares solution in the units of the input table.
        """
        self.feature_names = list(feature_names) if feature_names is not None else None
        self._build_model()

    def _build_model(self):
        self.model = LinearRegression(fit_intercept=True)

    def fit(self, X: np.ndarray, y: np.ndarray):
        X, y = self._check_training_data(X, y)
        try:
            self.model.fit(X, y)
        except ValueError as e:
            raise FitError(f"OLS fit failed: {e}") from e
        return self

    def predict(self, X: np.ndarray) -> np.ndarray:
        try:
            check_is_fitted(self.model)
        except NotFittedError as e:
            raise RuntimeError("Model is not fit yet.") from e
        return self.model.predict(np.asarray(X, dtype=float))

    def coefficients(self) -> dict[str, float]:
        """Intercept followed by one slope per predictor."""
        try:
            check_is_fitted(self.model)
        except NotFittedError as e:
            raise RuntimeError("Model is not fit yet.") from e

        coef = self.model.coef_
        names = self.feature_names or [f"x{i}" for i in range(len(coef))]
        out = {"intercept": float(self.model.intercept_)}
        out.update({name: float(b) for name, b in zip(names, coef)})
        return out
