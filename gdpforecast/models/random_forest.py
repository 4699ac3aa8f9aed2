# gdpforecast/models/random_forest.py

from __future__ import annotations

import numpy as np
from sklearn.ensemble import RandomForestRegressor
from sklearn.exceptions import NotFittedError
from sklearn.utils.validation import check_is_fitted

from gdpforecast.data.analysis_config import RandomForestParams
from gdpforecast.errors import FitError
from .base import GDPForecastModel


class GDPForecasterRF(GDPForecastModel):
    def __init__(self, params: RandomForestParams | None = None):
        """
        Random forest regression on the same predictors as the OLS model.

        The seed (random_state, default 42) fixes bootstrap sampling and the
        per-split feature draw, so repeated fits give identical forests.
        """
        self.params = params or RandomForestParams()
        self._build_model()

    def _build_model(self):
        p = self.params
        self.model = RandomForestRegressor(
            n_estimators=p.n_estimators,
            max_features=p.max_features,
            min_samples_leaf=p.min_samples_leaf,
            bootstrap=p.bootstrap,
            random_state=p.random_state,
            n_jobs=p.n_jobs,
        )

    def fit(self, X: np.ndarray, y: np.ndarray):
        X, y = self._check_training_data(X, y)
        try:
            self.model.fit(X, y)
        except ValueError as e:
            raise FitError(f"Random forest fit failed: {e}") from e
        return self

    def predict(self, X: np.ndarray) -> np.ndarray:
        """Average of the per-tree predictions."""
        try:
            check_is_fitted(self.model)
        except NotFittedError as e:
            raise RuntimeError("Model is not fit yet.") from e
        return self.model.predict(np.asarray(X, dtype=float))
