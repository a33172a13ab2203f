from .features.lexicon import DEFAULT_LEXICON, Lexicon, LexiconError
from .features.sentiment import ScoreResult, analyze, analyze_batch, annotate, classify, sentiment_emoji, tokenize
from .features.stats import SentimentStats, summarize

__all__ = [
    "DEFAULT_LEXICON", "Lexicon", "LexiconError",
    "ScoreResult", "analyze", "analyze_batch", "annotate", "classify", "sentiment_emoji", "tokenize",
    "SentimentStats", "summarize",
]
