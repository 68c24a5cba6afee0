"""Clip engagement stats aggregation."""

__version__ = "0.1.0"
