# gdpforecast/data/analysis_config.py

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

# Pick up GDPFORECAST_DATA_PATH from a local .env file
load_dotenv()

DATA_PATH_ENV = "GDPFORECAST_DATA_PATH"

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "analysis.yaml"

DEFAULT_COLUMNS = ["GDP", "GFCF", "UNEM", "ConsumerPrices", "GovExp", "HouseExp"]
DEFAULT_FEATURES = ["GFCF", "GovExp", "HouseExp"]


@dataclass
class RandomForestParams:
    n_estimators: int = 500
    max_features: int | float | str | None = 1
    min_samples_leaf: int = 5
    bootstrap: bool = True
    random_state: int = 42
    n_jobs: int | None = 1


@dataclass
class AnalysisConfig:
    data_path: Path = Path("data/macro_quarterly.csv")
    date_column: str = "Date"
    date_format: str = "%Y-%m-%d"
    columns: list[str] = field(default_factory=lambda: list(DEFAULT_COLUMNS))
    target: str = "GDP"
    features: list[str] = field(default_factory=lambda: list(DEFAULT_FEATURES))
    train_fraction: float = 0.8
    random_forest: RandomForestParams = field(default_factory=RandomForestParams)
    walk_forward_min_train_rows: int = 20

    def __post_init__(self):
        self.data_path = Path(self.data_path)

        if self.target not in self.columns:
            raise ValueError(
                f"Target '{self.target}' is not one of the dataset columns: {self.columns}"
            )
        unknown = [f for f in self.features if f not in self.columns]
        if unknown:
            raise ValueError(
                f"Features {unknown} are not dataset columns: {self.columns}"
            )
        if self.target in self.features:
            raise ValueError(f"Target '{self.target}' cannot also be a feature.")
        if not 0.0 < self.train_fraction < 1.0:
            raise ValueError(
                f"train_fraction must lie strictly between 0 and 1, got {self.train_fraction}"
            )


def load_analysis_config(config_path: str | Path | None = None) -> AnalysisConfig:
    """
    Load run settings from YAML (default: gdpforecast/config/analysis.yaml).

    Optional keys fall back to the dataclass defaults. If the environment
    variable GDPFORECAST_DATA_PATH is set, it replaces dataset.path.
    """
    config_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        yaml_data = yaml.safe_load(f) or {}

    dataset = yaml_data.get("dataset", {})
    split = yaml_data.get("split", {})
    rf = yaml_data.get("random_forest", {})
    walk = yaml_data.get("walk_forward", {})

    rf_defaults = RandomForestParams()
    rf_params = RandomForestParams(
        n_estimators=rf.get("n_estimators", rf_defaults.n_estimators),
        max_features=rf.get("max_features", rf_defaults.max_features),
        min_samples_leaf=rf.get("min_samples_leaf", rf_defaults.min_samples_leaf),
        bootstrap=rf.get("bootstrap", rf_defaults.bootstrap),
        random_state=rf.get("random_state", rf_defaults.random_state),
        n_jobs=rf.get("n_jobs", rf_defaults.n_jobs),
    )

    data_path = os.getenv(DATA_PATH_ENV) or dataset.get("path", "data/macro_quarterly.csv")

    return AnalysisConfig(
        data_path=Path(data_path),
        date_column=dataset.get("date_column", "Date"),
        date_format=dataset.get("date_format", "%Y-%m-%d"),
        columns=list(dataset.get("columns", DEFAULT_COLUMNS)),
        target=yaml_data.get("target", "GDP"),
        features=list(yaml_data.get("features", DEFAULT_FEATURES)),
        train_fraction=float(split.get("train_fraction", 0.8)),
        random_forest=rf_params,
        walk_forward_min_train_rows=int(walk.get("min_train_rows", 20)),
    )
