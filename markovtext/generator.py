#!/usr/bin/env python3
"""
Sentence Generator
==================
Random walk over a trained MarkovModel.

A starter phrase is picked first, then the walk keeps following transitions
and appending their words until it reaches a phrase with no recorded
successor (usually one ending a sentence). Every choice is
``rng.next() % len(candidates)``, so the output depends only on the model and
the value sequence of the randomness source.
"""

import logging
from typing import Optional

from .entropy import RandomSource, SeededRandom
from .errors import NoModel, WordLimitExceeded
from .model import MarkovModel

logger = logging.getLogger(__name__)

# Safety limit for the longest sentence, to stop cycles in the transition graph
MAX_WORD_COUNT = 1000


class SentenceGenerator:
    """Generates sentences from a trained MarkovModel"""

    def __init__(self, model: Optional[MarkovModel], max_word_count: int = MAX_WORD_COUNT):
        self.model = model
        self.max_word_count = max_word_count

    def generate(self, rng: RandomSource) -> str:
        """
        Generate a single sentence.

        Args:
            rng: Source of unsigned 32-bit values

        Returns:
            The generated sentence

        Raises:
            NoModel: If there is no model or it has no starter phrases
            WordLimitExceeded: If the walk reaches ``max_word_count`` words
        """
        model = self.model
        if model is None or model.is_empty:
            raise NoModel()

        starters = model.starter_phrases
        phrase = starters[rng.next() % len(starters)]
        words = [phrase]
        word_count = model.order
        logger.debug(f"Starting sentence with {phrase!r}")

        while True:
            candidates = model.transitions_for(phrase)
            if not candidates:
                break

            word_count += 1
            if word_count >= self.max_word_count:
                raise WordLimitExceeded(word_count, ' '.join(words))

            phrase, word = candidates[rng.next() % len(candidates)]
            words.append(word)

        logger.debug(f"Generated sentence of {word_count} words")
        return ' '.join(words)

    def generate_from_seed(self, seed: str) -> str:
        """Generate a sentence reproducibly from a seed string."""
        return self.generate(SeededRandom(seed))

    def generate_batch(self, count: int, rng: RandomSource) -> list[str]:
        """Generate ``count`` sentences drawing from one randomness source."""
        return [self.generate(rng) for _ in range(count)]


__all__ = ["MAX_WORD_COUNT", "SentenceGenerator"]
