"""Result objects produced by the analysis engine.

Attributes are snake_case; ``to_dict()`` emits the camelCase field names the
JSON consumers rely on.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal


Trend = Literal["rising", "falling", "stable"]
Significance = Literal["low", "medium", "high", "critical"]
HealthTrend = Literal["improving", "deteriorating", "stable"]
RiskLevel = Literal["low", "medium", "high", "critical"]
CorrelationStrength = Literal["weak", "moderate", "strong", "very_strong"]
CorrelationDirection = Literal["positive", "negative"]
TrendDirection = Literal["up", "down", "sideways"]


@dataclass
class TrendResult:
    """Internal trend estimate over an ordered value sequence."""

    direction: TrendDirection = "sideways"
    strength: float = 0.0  # 0-100
    momentum: float = 0.0  # -100 to 100, sign of the latest move
    duration: int = 0  # consecutive periods in the dominant direction
    volatility: float = 0.0  # std of period-over-period % changes


@dataclass
class EconomicInsight:
    """Narrative insight about one indicator's latest move."""

    indicator_name: str
    current_value: float
    previous_value: float
    change_percent: float
    trend: Trend
    significance: Significance
    narrative: str
    investment_implication: str
    historical_context: str
    related_indicators: list[str] = field(default_factory=list)
    indicator_id: int | None = None
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def id(self) -> str:
        return f"insight_{self.indicator_id}_{int(self.created_at.timestamp() * 1000)}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "indicatorId": self.indicator_id,
            "indicatorName": self.indicator_name,
            "currentValue": self.current_value,
            "previousValue": self.previous_value,
            # JSON has no infinity: a zero previous value serialises as null
            "changePercent": self.change_percent if math.isfinite(self.change_percent) else None,
            "trend": self.trend,
            "significance": self.significance,
            "narrative": self.narrative,
            "investmentImplication": self.investment_implication,
            "historicalContext": self.historical_context,
            "relatedIndicators": list(self.related_indicators),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.created_at.isoformat(),
        }


@dataclass
class HealthComponents:
    """The five 0-100 sub-scores of the health score."""

    labor_market: float = 50.0
    inflation: float = 50.0
    economic_growth: float = 50.0
    fiscal_health: float = 50.0
    market_conditions: float = 50.0

    def to_dict(self) -> dict[str, float]:
        return {
            "laborMarket": self.labor_market,
            "inflation": self.inflation,
            "economicGrowth": self.economic_growth,
            "fiscalHealth": self.fiscal_health,
            "marketConditions": self.market_conditions,
        }


@dataclass
class EconomicHealthScore:
    """Composite economic health score."""

    overall_score: int  # 0-100
    components: HealthComponents
    narrative: str
    trend: HealthTrend
    risk_level: RiskLevel
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def id(self) -> str:
        return f"health_{int(self.created_at.timestamp() * 1000)}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "overallScore": self.overall_score,
            "trend": self.trend,
            "components": self.components.to_dict(),
            "narrative": self.narrative,
            "riskLevel": self.risk_level,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass
class CorrelationAnalysis:
    """Pearson correlation between one catalogue pair of indicators."""

    indicator_a_id: int | None
    indicator_b_id: int | None
    indicator_a_name: str
    indicator_b_name: str
    correlation_coeff: float  # -1 to 1
    strength: CorrelationStrength
    direction: CorrelationDirection
    confidence: float  # 0-100
    narrative: str
    sample_size: int = 0
    lag_days: int = 0
    last_updated: datetime = field(default_factory=datetime.now)

    @property
    def id(self) -> str:
        return (
            f"corr_{self.indicator_a_id}_{self.indicator_b_id}_"
            f"{int(self.last_updated.timestamp() * 1000)}"
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "indicatorAId": self.indicator_a_id,
            "indicatorBId": self.indicator_b_id,
            "indicatorAName": self.indicator_a_name,
            "indicatorBName": self.indicator_b_name,
            "correlationCoeff": self.correlation_coeff,
            "strength": self.strength,
            "direction": self.direction,
            "lagDays": self.lag_days,
            "confidence": self.confidence,
            "sampleSize": self.sample_size,
            "narrative": self.narrative,
            "lastUpdated": self.last_updated.isoformat(),
        }


@dataclass
class MarketSignal:
    """Warning raised from the health score or correlation results."""

    type: str  # recession_risk, correlation_alert
    strength: float  # 0-100
    confidence: float  # 0-100
    narrative: str
    trigger_indicators: list[str]
    historical_precedent: str

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "strength": self.strength,
            "confidence": self.confidence,
            "narrative": self.narrative,
            "triggerIndicators": list(self.trigger_indicators),
            "historicalPrecedent": self.historical_precedent,
        }


@dataclass
class AnalysisSummary:
    """Combined view: health score, top correlations and key insights."""

    health_score: EconomicHealthScore
    top_correlations: list[CorrelationAnalysis]
    key_insights: list[EconomicInsight]
    data_quality: float  # 0-100
    last_updated: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "healthScore": self.health_score.to_dict(),
            "topCorrelations": [c.to_dict() for c in self.top_correlations],
            "keyInsights": [i.to_dict() for i in self.key_insights],
            "lastUpdated": self.last_updated.isoformat(),
            "dataQuality": self.data_quality,
        }
