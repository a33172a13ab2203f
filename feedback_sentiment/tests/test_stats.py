# tests/test_stats.py
from types import MappingProxyType

import pytest

from ..features.sentiment import ScoreResult, analyze_batch
from ..features.stats import SentimentStats, round_half_up, summarize


def _rec(label, score=None):
    return {"sentiment": label, "sentimentScore": score}


def test_empty_is_all_zero():
    stats = summarize([])
    assert stats == SentimentStats()
    assert stats.to_dict() == {
        "total": 0, "positive": 0, "neutral": 0, "negative": 0,
        "positivePercentage": 0, "neutralPercentage": 0, "negativePercentage": 0,
        "averageScore": 0.0,
    }


def test_counts_percentages_and_average():
    stats = summarize([_rec("positive", 0.8), _rec("positive", 0.6), _rec("negative", -0.5)])
    assert stats.total == 3
    assert (stats.positive, stats.neutral, stats.negative) == (2, 0, 1)
    assert stats.positivePercentage == 67
    assert stats.negativePercentage == 33
    assert stats.neutralPercentage == 0
    assert stats.averageScore == 0.3


def test_percentages_rounded_independently():
    stats = summarize([_rec("positive"), _rec("neutral"), _rec("negative")])
    assert (stats.positivePercentage, stats.neutralPercentage, stats.negativePercentage) == (33, 33, 33)
    assert stats.positivePercentage + stats.neutralPercentage + stats.negativePercentage == 99


def test_half_rounds_up():
    # 1/8 = 12.5%
    stats = summarize([_rec("positive", 1.0)] + [_rec("neutral", 0.0)] * 7)
    assert stats.positivePercentage == 13
    assert stats.neutralPercentage == 88
    assert stats.averageScore == 0.13


def test_missing_scores_count_as_zero_in_mean():
    stats = summarize([_rec("positive", 1.0), {"sentiment": "neutral"}, _rec("neutral", None)])
    assert stats.total == 3
    assert stats.averageScore == 0.33


def test_unknown_label_only_counts_toward_total():
    stats = summarize([_rec("positive", 0.5), _rec("mixed", 0.5)])
    assert stats.total == 2
    assert stats.positive == 1
    assert stats.positivePercentage == 50
    assert stats.neutral == stats.negative == 0
    assert stats.averageScore == 0.5


def test_accepts_score_results_and_objects():
    class Row:
        def __init__(self, sentiment, sentiment_score):
            self.sentiment = sentiment
            self.sentiment_score = sentiment_score

    stats = summarize([ScoreResult("negative", -1.0), Row("negative", -0.5)])
    assert stats.negative == 2
    assert stats.negativePercentage == 100
    assert stats.averageScore == -0.75


def test_accepts_generator():
    stats = summarize(_rec("positive", 1.0) for _ in range(4))
    assert stats.total == 4
    assert stats.averageScore == 1.0


def test_batch_then_summarize():
    results = analyze_batch(["great support", "not good", "it is fine", ""])
    stats = summarize(results)
    assert stats.total == 4
    assert (stats.positive, stats.neutral, stats.negative) == (1, 2, 1)
    assert stats.averageScore == 0.0


@pytest.mark.parametrize("x,digits,expected", [
    (2.5, 0, 3), (0.125 * 100, 0, 13), (-2.5, 0, -2), (0.30000000000000004, 2, 0.3),
])
def test_round_half_up(x, digits, expected):
    assert round_half_up(x, digits) == pytest.approx(expected)


def test_accepts_read_only_mapping_rows():
    rows = [
        MappingProxyType({"sentiment": "positive", "sentimentScore": 0.8}),
        MappingProxyType({"sentiment": "negative", "sentimentScore": -0.4}),
    ]
    stats = summarize(rows)
    assert (stats.positive, stats.negative) == (1, 1)
    assert stats.averageScore == 0.2
