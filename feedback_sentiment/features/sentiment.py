# features/sentiment.py
# Lexicon + windowed intensifier sentiment (normalized to [-1, 1])
from __future__ import annotations
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Literal, Mapping, Optional

from .lexicon import DEFAULT_LEXICON, Lexicon

Label = Literal["positive", "neutral", "negative"]

POSITIVE_THRESHOLD = 0.1
NEGATIVE_THRESHOLD = -0.1
WINDOW = 2                                  # tokens scanned back for intensifiers

# anything but letters, digits and whitespace becomes a space ("_" is a word char for \w)
_NON_WORD = re.compile(r"[^\w\s]|_")

_EMOJI = {"positive": "😊", "negative": "😞", "neutral": "😐"}


@dataclass(frozen=True)
class ScoreResult:
    label: Label
    score: float

    def to_dict(self) -> Dict[str, Any]:
        # field names match the stored feedback record
        return {"sentiment": self.label, "score": self.score}


def tokenize(text: str) -> List[str]:
    # Lowercase, punctuation -> space, split on whitespace
    return _NON_WORD.sub(" ", (text or "").lower()).split()


def classify(score: float) -> Label:
    if score > POSITIVE_THRESHOLD: return "positive"
    if score < NEGATIVE_THRESHOLD: return "negative"
    return "neutral"


def _modifier(tokens: List[str], i: int, intensifiers: Mapping[str, float]) -> float:
    # Product of intensifier factors in the backward window [i-2, i)
    window = tokens[max(0, i - WINDOW):i]
    mod = 1.0
    for w in window:
        factor = intensifiers.get(w)
        if factor is not None:
            mod *= factor
    return mod


def _score(tokens: List[str], lex: Lexicon) -> float:
    total = 0.0
    counted = 0
    for i, w in enumerate(tokens):
        base = lex.polarity(w)
        if base is None: continue
        total += base * _modifier(tokens, i, lex.intensifiers)
        counted += 1              # neutral words dilute the average without moving it

    normalized = total / counted if counted else 0.0
    return max(-1.0, min(1.0, normalized))


def analyze(text: Optional[str], lexicon: Lexicon = DEFAULT_LEXICON) -> ScoreResult:
    """
    Score one piece of free text.
      - blank/None -> neutral, 0.0
      - score = mean of (polarity * intensifier product) over lexicon words, clamped to [-1, 1]
      - label from fixed +/-0.1 thresholds
    Never raises for string input.
    """
    if not text or not text.strip():
        return ScoreResult("neutral", 0.0)
    s = _score(tokenize(text), lexicon)
    return ScoreResult(classify(s), s)


def analyze_batch(texts: Iterable[Optional[str]], lexicon: Lexicon = DEFAULT_LEXICON,
                  workers: Optional[int] = None) -> List[ScoreResult]:
    # Order-preserving; items are independent so a thread pool is optional
    items = list(texts)
    if not workers or workers <= 1 or len(items) < 2:
        return [analyze(t, lexicon) for t in items]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda t: analyze(t, lexicon), items))


def annotate(record: Mapping[str, Any], lexicon: Lexicon = DEFAULT_LEXICON) -> Dict[str, Any]:
    """Copy of a feedback record with sentiment + sentimentScore derived from its content."""
    result = analyze(record.get("content"), lexicon)
    out = dict(record)
    out["sentiment"] = result.label
    out["sentimentScore"] = result.score
    return out


def sentiment_emoji(label: str) -> str:
    return _EMOJI.get(label, _EMOJI["neutral"])
