"""Data models for stored economic indicators."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class DataPoint:
    """Single dated observation of an indicator."""

    date: date
    value: float


@dataclass
class IndicatorSeries:
    """Indicator metadata plus its observations, most-recent-first."""

    name: str
    category: str
    source: str
    data: list[DataPoint] = field(default_factory=list)
    id: int | None = None
    frequency: str | None = None
    units: str | None = None

    @property
    def values(self) -> list[float]:
        return [point.value for point in self.data]

    def __len__(self) -> int:
        return len(self.data)
