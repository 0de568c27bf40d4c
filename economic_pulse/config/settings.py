"""Configuration settings and rule tables for the analysis engine."""

from dataclasses import dataclass, field
from pathlib import Path
import os

from dotenv import load_dotenv


load_dotenv()


# Significance schedules: category -> ascending (inclusive lower bound, label) steps
SIGNIFICANCE_SCHEDULES: dict[str, tuple[tuple[float, str], ...]] = {
    "employment": (
        (0.0, "low"),
        (1.0, "medium"),
        (3.0, "high"),
        (5.0, "critical"),
    ),
    "market_indices": (
        (0.0, "low"),
        (3.0, "medium"),
        (7.0, "high"),
        (12.0, "critical"),
    ),
    "inflation": (
        (0.0, "low"),
        (0.5, "medium"),
        (1.0, "high"),
        (3.0, "critical"),
    ),
}

# Unknown categories are classified with this schedule
DEFAULT_SIGNIFICANCE_CATEGORY = "employment"

# Health score component -> indicator name in the store
HEALTH_INDICATORS: dict[str, str] = {
    "laborMarket": "Unemployment Rate",
    "inflation": "Consumer Price Index",
    "economicGrowth": "Real GDP",
    "fiscalHealth": "Federal Budget Balance",
    "marketConditions": "S&P 500",
}

# Candidate pairs for correlation analysis (domain pairs, not a cross product)
CORRELATION_PAIRS: list[tuple[str, str]] = [
    ("Unemployment Rate", "Consumer Price Index"),
    ("Federal Budget Balance", "Real GDP"),
    ("S&P 500", "Consumer Price Index"),
    ("Unemployment Rate", "Real GDP"),
    ("Federal Revenue", "Real GDP"),
]

# Indicators highlighted in the analysis summary
KEY_INSIGHT_INDICATORS: list[str] = [
    "Unemployment Rate",
    "Consumer Price Index",
    "Real GDP",
    "S&P 500",
]


@dataclass
class Settings:
    """Application settings."""

    cache_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv(
                "ECONOMIC_PULSE_CACHE_DIR",
                str(Path(__file__).parent.parent.parent / "cache"),
            )
        )
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    db_path: Path = field(init=False)

    def __post_init__(self) -> None:
        self.cache_dir = Path(self.cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        override = os.getenv("ECONOMIC_PULSE_DB")
        self.db_path = Path(override) if override else self.cache_dir / "economic_data.db"

    def validate(self) -> None:
        """Validate that the indicator database is present."""
        if not self.db_path.exists():
            raise ValueError(
                f"Indicator database not found at {self.db_path}. "
                "Load data first with: python -m economic_pulse load"
            )
