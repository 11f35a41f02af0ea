#!/usr/bin/env python3
"""
Errors
======
Exceptions raised while building a Markov model or generating from it.

Build-time problems are ValueErrors (bad input), generation-time problems are
RuntimeErrors (bad state), so callers that only know the builtins still catch
them sensibly.
"""


class MarkovTextError(Exception):
    """Base class for all markovtext errors."""


class InvalidBufferSize(MarkovTextError, ValueError):
    """Sliding window constructed with a capacity below 1."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Sliding window capacity must be at least 1, got {capacity}")


class EmptySourceCollection(MarkovTextError, ValueError):
    """Sliding window initialized from an empty sequence."""

    def __init__(self):
        super().__init__("Cannot create a sliding window from an empty sequence")


class NoPhrasesFound(MarkovTextError, ValueError):
    """The corpus produced no phrase transitions for the requested order."""

    def __init__(self, order: int):
        self.order = order
        super().__init__(f"No phrases of order {order} found in the corpus")


class NoStarterPhrases(MarkovTextError, ValueError):
    """The corpus produced no sentence-initial phrase for the requested order."""

    def __init__(self, order: int):
        self.order = order
        super().__init__(f"No starter phrases of order {order} could be generated from the corpus")


class NoModel(MarkovTextError, RuntimeError):
    """Generation attempted before a model was built."""

    def __init__(self):
        super().__init__("There is no Markov model. Build one before generating sentences.")


class WordLimitExceeded(MarkovTextError, RuntimeError):
    """Generation hit the word cap, usually because of a cycle in the transitions."""

    def __init__(self, word_count: int, partial: str):
        self.word_count = word_count
        self.partial = partial
        super().__init__(f"Word limit {word_count} reached for sentence:\n{partial}")


__all__ = [
    "MarkovTextError",
    "InvalidBufferSize",
    "EmptySourceCollection",
    "NoPhrasesFound",
    "NoStarterPhrases",
    "NoModel",
    "WordLimitExceeded",
]
