# gdpforecast/errors.py

class GDPForecastError(Exception):
    """Base class for failures that abort an analysis run."""


class ParseError(GDPForecastError, ValueError):
    """Input table could not be read into a clean numeric frame
    (bad date, non-numeric cell, missing column, gap with no prior value)."""


class ShapeError(GDPForecastError, ValueError):
    """Row counts do not line up (split too small, prediction / truth length mismatch)."""


class FitError(GDPForecastError, RuntimeError):
    """A regression could not be fitted on the training segment."""
