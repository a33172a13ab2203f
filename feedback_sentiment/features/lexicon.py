# features/lexicon.py
# Immutable word lists + intensifier table used by the sentiment scorer
from __future__ import annotations
import json
import logging
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

log = logging.getLogger(__name__)

POSITIVE_WORDS = {
    "amazing", "awesome", "brilliant", "excellent", "fantastic", "great", "incredible",
    "love", "wonderful", "perfect", "outstanding", "superb", "terrific", "magnificent",
    "good", "nice", "helpful", "useful", "clear", "easy", "simple", "beautiful",
    "impressed", "satisfied", "happy", "pleased", "delighted", "thrilled", "excited",
    "recommend", "best", "favorite", "appreciate", "thank", "thanks", "grateful",
}

NEGATIVE_WORDS = {
    "awful", "terrible", "horrible", "disgusting", "hate", "worst", "bad", "poor",
    "disappointing", "frustrated", "annoying", "confusing", "difficult", "hard",
    "broken", "bug", "error", "problem", "issue", "fail", "failed", "wrong",
    "slow", "laggy", "crash", "crashed", "useless", "pointless", "waste",
    "angry", "upset", "sad", "unhappy", "dissatisfied", "disappointed",
}

NEUTRAL_WORDS = {
    "okay", "ok", "fine", "average", "normal", "standard", "typical", "regular",
    "maybe", "perhaps", "possibly", "might", "could", "would", "should",
}

# Multiplicative factors applied to the next sentiment word (negative flips polarity)
INTENSIFIERS = {
    "very": 1.5, "really": 1.4, "extremely": 1.8, "incredibly": 1.7,
    "absolutely": 1.6, "totally": 1.5, "completely": 1.6, "quite": 1.2,
    "pretty": 1.1, "somewhat": 0.8, "kind of": 0.7, "sort of": 0.7,
    "not": -1.0, "never": -1.0, "no": -0.8, "hardly": -0.6, "barely": -0.6,
}


class LexiconError(ValueError):
    """Raised when a lexicon is inconsistent or cannot be loaded."""


def _words(items: Iterable[str]) -> frozenset:
    return frozenset(w.strip().lower() for w in items if w and w.strip())


@dataclass(frozen=True, eq=False)
class Lexicon:
    """Read-only polarity sets and intensifier factors; build once, share freely."""
    positive: frozenset
    negative: frozenset
    neutral: frozenset
    intensifiers: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "positive", _words(self.positive))
        object.__setattr__(self, "negative", _words(self.negative))
        object.__setattr__(self, "neutral", _words(self.neutral))

        factors: Dict[str, float] = {}
        for term, value in dict(self.intensifiers).items():
            key = " ".join(str(term).lower().split())
            try:
                factor = float(value)
            except (TypeError, ValueError):
                raise LexiconError(f"intensifier {term!r} has non-numeric factor {value!r}") from None
            if factor == 0.0:
                raise LexiconError(f"intensifier {term!r} has a zero factor")
            factors[key] = factor
        object.__setattr__(self, "intensifiers", MappingProxyType(factors))

        # sets must be pairwise disjoint so every word has exactly one polarity
        for a, b in (("positive", "negative"), ("positive", "neutral"), ("negative", "neutral")):
            shared = getattr(self, a) & getattr(self, b)
            if shared:
                raise LexiconError(f"{a} and {b} words overlap: {', '.join(sorted(shared))}")

    def polarity(self, word: str) -> Optional[int]:
        """+1 / -1 / 0 for lexicon words, None for words that carry no weight."""
        if word in self.positive:
            return 1
        if word in self.negative:
            return -1
        if word in self.neutral:
            return 0
        return None

    def sizes(self) -> Dict[str, int]:
        return {
            "positive": len(self.positive),
            "negative": len(self.negative),
            "neutral": len(self.neutral),
            "intensifiers": len(self.intensifiers),
        }

    @classmethod
    def from_json(cls, path: str, extend: bool = True) -> "Lexicon":
        """
        Load {"positive": [...], "negative": [...], "neutral": [...], "intensifiers": {...}}.
        With extend=True the file adds to the built-in tables instead of replacing them.
        """
        if not os.path.isfile(path):
            raise LexiconError(f"Lexicon not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise LexiconError(f"Lexicon {path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise LexiconError(f"Lexicon {path} must hold a JSON object")

        base = DEFAULT_LEXICON if extend else None
        pos = set(base.positive) if base else set()
        neg = set(base.negative) if base else set()
        neu = set(base.neutral) if base else set()
        ints = dict(base.intensifiers) if base else {}

        pos |= _words(data.get("positive") or [])
        neg |= _words(data.get("negative") or [])
        neu |= _words(data.get("neutral") or [])
        extra = data.get("intensifiers") or {}
        if not isinstance(extra, dict):
            raise LexiconError(f"Lexicon {path}: 'intensifiers' must be an object")
        ints.update(extra)

        lex = cls(positive=pos, negative=neg, neutral=neu, intensifiers=ints)
        log.info("Loaded lexicon from %s (%s)", path, lex.sizes())
        return lex


DEFAULT_LEXICON = Lexicon(
    positive=POSITIVE_WORDS,
    negative=NEGATIVE_WORDS,
    neutral=NEUTRAL_WORDS,
    intensifiers=INTENSIFIERS,
)
