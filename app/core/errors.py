# app/core/errors.py
from __future__ import annotations


class DepthChartError(ValueError):
    """Base for every rejected depth chart operation. Callers must fix the request, not retry."""


class InvalidArgument(DepthChartError):
    pass


class Conflict(DepthChartError):
    pass


class OutOfRange(DepthChartError):
    pass
