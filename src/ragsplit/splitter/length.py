"""Length functions used to measure chunks."""

from collections.abc import Callable

from ragsplit.config.models import LengthMetric
from ragsplit.tokenizer import BaseTokenizer, get_tokenizer

LengthFunction = Callable[[str], int]


def character_length(text: str) -> int:
    return len(text)


class TokenLength:
    """Measures text in tokens.

    Attributes:
        tokenizer: Tokenizer to count with; the shared tokenizer when None
    """

    def __init__(self, tokenizer: BaseTokenizer | None = None):
        self.tokenizer = tokenizer or get_tokenizer()

    def __call__(self, text: str) -> int:
        return self.tokenizer.count_tokens(text)

    def __repr__(self) -> str:
        return f"TokenLength({self.tokenizer.name})"


def get_length_function(
    metric: LengthMetric | str, tokenizer: BaseTokenizer | None = None
) -> LengthFunction:
    """Resolve a length metric to a length function.

    Args:
        metric: "character" or "token"
        tokenizer: Tokenizer for the token metric (shared tokenizer if None)

    Returns:
        Callable mapping text to its length
    """
    metric = LengthMetric(metric)
    if metric == LengthMetric.TOKEN:
        return TokenLength(tokenizer)
    return character_length
