# features/stats.py
# Label distribution + mean score over already-scored feedback records
from __future__ import annotations
import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from .sentiment import ScoreResult


@dataclass(frozen=True)
class SentimentStats:
    total: int = 0
    positive: int = 0
    neutral: int = 0
    negative: int = 0
    positivePercentage: int = 0
    neutralPercentage: int = 0
    negativePercentage: int = 0
    averageScore: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def round_half_up(x: float, ndigits: int = 0) -> float:
    # 12.5 -> 13, not banker's rounding
    scale = 10 ** ndigits
    return math.floor(x * scale + 0.5) / scale


def _label_and_score(record: Any) -> Tuple[Optional[str], float]:
    """Accepts mapping records ({sentiment, sentimentScore}), ScoreResult, or objects with attributes."""
    if isinstance(record, ScoreResult):
        return record.label, record.score
    if isinstance(record, Mapping):
        label = record.get("sentiment")
        score = record.get("sentimentScore", record.get("sentiment_score"))
    else:
        label = getattr(record, "sentiment", None)
        score = getattr(record, "sentiment_score", None)
    # missing/null score contributes 0 but the record still counts toward the mean
    return label, float(score) if score else 0.0


def summarize(records: Iterable[Any]) -> SentimentStats:
    """
    Single pass over records:
      - counts per label (unknown labels only add to total)
      - each percentage rounded on its own, so the three may not sum to 100
      - averageScore = sum(score or 0) / total, 2 decimals
    """
    counts = {"positive": 0, "neutral": 0, "negative": 0}
    total = 0
    score_sum = 0.0
    for rec in records:
        label, score = _label_and_score(rec)
        total += 1
        if label in counts:
            counts[label] += 1
        score_sum += score

    if total == 0:
        return SentimentStats()

    def pct(n: int) -> int:
        return int(round_half_up(n / total * 100))

    return SentimentStats(
        total=total,
        positive=counts["positive"],
        neutral=counts["neutral"],
        negative=counts["negative"],
        positivePercentage=pct(counts["positive"]),
        neutralPercentage=pct(counts["neutral"]),
        negativePercentage=pct(counts["negative"]),
        averageScore=round_half_up(score_sum / total, 2),
    )
