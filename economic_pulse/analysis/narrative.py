"""Narrative text for insights, health scores and correlations.

Text is a pure function of already-computed numbers. ``Narrator`` enforces the
output contract (leading capital, collapsed whitespace, bounded length) so any
implementation can be swapped in without touching the numeric code.
"""

import math
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from economic_pulse.analysis.statistics import percentile_rank
from economic_pulse.models import HealthComponents, TrendResult


MAX_NARRATIVE_LENGTH = 1000
HISTORY_MIN_POINTS = 10  # Points needed for a historical comparison

COMPONENT_LABELS = {
    "laborMarket": "labor market",
    "inflation": "inflation",
    "economicGrowth": "economic growth",
    "fiscalHealth": "fiscal health",
    "marketConditions": "market conditions",
}

CATEGORY_CONTEXT = {
    "employment": {
        "increased": "This improvement in employment conditions suggests strengthening labor market dynamics.",
        "decreased": "This decline may indicate softening labor market conditions.",
    },
    "inflation": {
        "increased": "Rising price pressures may influence upcoming monetary policy decisions.",
        "decreased": "Moderating inflation could give monetary policy more flexibility.",
    },
    "economic_growth": {
        "increased": "This acceleration points to expanding economic activity.",
        "decreased": "This slowdown suggests moderating economic momentum.",
    },
    "market_indices": {
        "increased": "Market gains reflect investor optimism and risk appetite.",
        "decreased": "Market declines suggest growing caution among investors.",
    },
    "fiscal_policy": {
        "increased": "This fiscal expansion reflects government stimulus efforts.",
        "decreased": "This fiscal restraint reflects efforts to manage government spending.",
    },
}

INVESTMENT_IMPLICATIONS = {
    "employment": {
        "rising": "Improving employment typically supports consumer spending and economic growth, which can favor equities and reduce the appeal of bonds.",
        "falling": "Weakening employment may signal an economic slowdown, which often leads to defensive positioning and stronger demand for bonds.",
    },
    "inflation": {
        "rising": "Rising inflation may prompt central bank tightening, which tends to pressure growth stocks while favoring commodities and inflation-protected securities.",
        "falling": "Declining inflation reduces pressure for rate hikes, which tends to support growth assets and longer-duration bonds.",
    },
    "market_indices": {
        "rising": "Market strength signals investor confidence and tends to support risk assets and cyclical sectors.",
        "falling": "Market weakness may indicate risk-off sentiment, which tends to favor defensive assets and safe havens.",
    },
    "economic_growth": {
        "rising": "Faster growth tends to support corporate earnings and cyclical sectors, while raising the odds of higher yields.",
        "falling": "Slowing growth tends to favor quality and defensive sectors and can support longer-duration bonds.",
    },
    "fiscal_policy": {
        "rising": "Fiscal expansion may stimulate growth but raises debt concerns, which can support equities while pressuring long-term bonds.",
        "falling": "Fiscal tightening reduces growth stimulus but improves fiscal sustainability, with mixed market implications.",
    },
}

GENERIC_IMPLICATION = (
    "Market implications depend on the broader economic context and should be "
    "evaluated alongside other indicators."
)


def ordinal(n: int) -> str:
    """1 -> 1st, 2 -> 2nd, 11 -> 11th, 23 -> 23rd."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


class Narrator(ABC):
    """Turns computed analysis fields into text."""

    def insight_narrative(
        self,
        indicator_name: str,
        category: str,
        change_percent: float,
        trend: TrendResult,
    ) -> str:
        return self._finalize(
            self._compose_insight(indicator_name, category, change_percent, trend)
        )

    def investment_implication(self, category: str, trend: str) -> str:
        return self._finalize(self._compose_implication(category, trend))

    def historical_context(self, current_value: float, values: Sequence[float]) -> str:
        return self._finalize(self._compose_history(current_value, values))

    def health_narrative(
        self,
        overall_score: int,
        components: HealthComponents,
        trend: str,
        risk_level: str,
    ) -> str:
        return self._finalize(
            self._compose_health(overall_score, components, trend, risk_level)
        )

    def correlation_narrative(
        self, name_a: str, name_b: str, coefficient: float, strength: str
    ) -> str:
        return self._finalize(
            self._compose_correlation(name_a, name_b, coefficient, strength)
        )

    @abstractmethod
    def _compose_insight(
        self, indicator_name: str, category: str, change_percent: float, trend: TrendResult
    ) -> str: ...

    @abstractmethod
    def _compose_implication(self, category: str, trend: str) -> str: ...

    @abstractmethod
    def _compose_history(self, current_value: float, values: Sequence[float]) -> str: ...

    @abstractmethod
    def _compose_health(
        self, overall_score: int, components: HealthComponents, trend: str, risk_level: str
    ) -> str: ...

    @abstractmethod
    def _compose_correlation(
        self, name_a: str, name_b: str, coefficient: float, strength: str
    ) -> str: ...

    @staticmethod
    def _finalize(text: str) -> str:
        """Collapse whitespace, capitalize, and cap the length."""
        text = " ".join(text.split())
        if not text:
            return text
        text = text[0].upper() + text[1:]
        if len(text) >= MAX_NARRATIVE_LENGTH:
            cut = text[: MAX_NARRATIVE_LENGTH - 1]
            sentence_end = cut.rfind(". ")
            text = cut[: sentence_end + 1] if sentence_end > 0 else cut
        return text


class TemplateNarrator(Narrator):
    """Fixed sentence templates keyed on category, direction and magnitude."""

    def _compose_insight(
        self, indicator_name: str, category: str, change_percent: float, trend: TrendResult
    ) -> str:
        if change_percent > 0:
            direction = "increased"
        elif change_percent < 0:
            direction = "decreased"
        else:
            direction = "remained stable"

        magnitude = abs(change_percent)
        if math.isnan(magnitude):
            direction = "unknown"
            text = f"{indicator_name} could not be compared with the previous period. "
        elif direction == "remained stable":
            text = f"{indicator_name} remained stable compared with the previous period. "
        elif math.isinf(magnitude):
            text = f"{indicator_name} {direction} from a zero reading in the previous period. "
        else:
            if magnitude > 5:
                adverb = "significantly"
            elif magnitude > 1:
                adverb = "moderately"
            else:
                adverb = "slightly"
            text = (
                f"{indicator_name} {direction} {adverb} by {magnitude:.1f}% "
                "from the previous period. "
            )

        if trend.direction != "sideways":
            text += (
                f"This continues a{'n upward' if trend.direction == 'up' else ' downward'} "
                f"trend that has held for {trend.duration} consecutive "
                f"period{'s' if trend.duration != 1 else ''}. "
            )

        context = CATEGORY_CONTEXT.get(category, {}).get(direction)
        text += context or "This change reflects evolving economic conditions that warrant monitoring."
        return text

    def _compose_implication(self, category: str, trend: str) -> str:
        return INVESTMENT_IMPLICATIONS.get(category, {}).get(trend, GENERIC_IMPLICATION)

    def _compose_history(self, current_value: float, values: Sequence[float]) -> str:
        if len(values) < HISTORY_MIN_POINTS:
            return "Insufficient historical data for meaningful comparison."

        arr = np.asarray(values, dtype=float)
        high, low, avg = float(arr.max()), float(arr.min()), float(arr.mean())
        span = high - low

        if span == 0:
            text = "This reading is unchanged across the available historical period."
        elif current_value >= high - 0.05 * span:
            text = "This reading is near historical highs for the available data period."
        elif current_value <= low + 0.05 * span:
            text = "This reading is near historical lows for the available data period."
        elif current_value >= avg + 0.1 * span:
            text = "This reading is above the historical average."
        elif current_value <= avg - 0.1 * span:
            text = "This reading is below the historical average."
        else:
            text = "This reading is within the normal historical range."

        pct = round(percentile_rank(arr, current_value))
        text += (
            f" It ranks in the {ordinal(pct)} percentile of {len(arr)} recorded values, "
            f"which range from {low:,.2f} to {high:,.2f}."
        )
        return text

    def _compose_health(
        self, overall_score: int, components: HealthComponents, trend: str, risk_level: str
    ) -> str:
        if overall_score >= 80:
            condition = "strong"
        elif overall_score >= 60:
            condition = "moderate"
        elif overall_score >= 40:
            condition = "concerning"
        else:
            condition = "weak"

        scores = components.to_dict()
        strongest = max(scores, key=scores.get)
        weakest = min(scores, key=scores.get)

        text = (
            f"The current economic health score is {overall_score}/100, indicating "
            f"{condition} economic conditions with {risk_level} risk. "
            f"The economy appears to be {trend}. "
        )
        if scores[strongest] == scores[weakest]:
            return text + f"All components sit at {round(scores[strongest])}/100."
        return text + (
            f"Strengths include {COMPONENT_LABELS[strongest]} ({round(scores[strongest])}/100), "
            f"while {COMPONENT_LABELS[weakest]} ({round(scores[weakest])}/100) "
            "presents the greatest concern."
        )

    def _compose_correlation(
        self, name_a: str, name_b: str, coefficient: float, strength: str
    ) -> str:
        direction = "positive" if coefficient >= 0 else "negative"
        text = (
            f"{name_a} and {name_b} show a {strength.replace('_', ' ')} {direction} "
            f"correlation ({coefficient:.2f}). "
        )
        if direction == "positive":
            text += f"When {name_a} increases, {name_b} tends to increase as well. "
        else:
            text += f"When {name_a} increases, {name_b} tends to decrease. "

        if strength in ("very_strong", "strong"):
            text += "This relationship is reliable enough to inform analysis."
        elif strength == "moderate":
            text += "This relationship is moderately reliable and should be weighed alongside other factors."
        else:
            text += "This relationship is weak and may not be reliable for predictive purposes."
        return text
