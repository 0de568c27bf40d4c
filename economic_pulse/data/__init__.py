"""Indicator storage."""

from .store import SeriesReader, SeriesStore

__all__ = ["SeriesReader", "SeriesStore"]
