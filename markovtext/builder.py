#!/usr/bin/env python3
"""
Model Builder
=============
Trains a word-level Markov model from corpus text.

The corpus is scanned one token at a time through a sliding window of
``order`` tokens. Once the window is full, the window contents form the
current phrase:

- the first phrase of a sentence becomes a starter phrase
- every later phrase is recorded as a transition from the phrase before it

A token whose last character is a sentence delimiter closes the sentence and
resets the window, so phrases never span sentence boundaries. Sentences
shorter than ``order`` tokens contribute nothing.
"""

import logging

from .errors import NoPhrasesFound, NoStarterPhrases
from .model import MarkovModel, Transition
from .normalizer import is_sentence_terminator, tokenize
from .window import SlidingWindow

logger = logging.getLogger(__name__)


class ModelBuilder:
    """Builds Markov models of a fixed order"""

    def __init__(self, order: int = 2):
        self.order = order

    def build(self, corpus: str) -> MarkovModel:
        """
        Build a model from raw corpus text.

        Args:
            corpus: Raw text; normalized and tokenized before scanning

        Returns:
            The trained MarkovModel

        Raises:
            InvalidBufferSize: If order is below 1
            NoPhrasesFound: If no phrase was ever followed by another token
            NoStarterPhrases: If no sentence had at least ``order`` tokens
        """
        order = self.order
        window = SlidingWindow(order)
        model = MarkovModel(order=order)

        tokens = tokenize(corpus)
        model.token_count = len(tokens)
        logger.debug(f"Scanning {len(tokens)} tokens with order {order}")

        count = 0
        previous_phrase = None

        for token in tokens:
            window[count] = token
            count += 1

            if count < order:
                # Window not full yet; a sentence this short yields no phrase
                if is_sentence_terminator(token):
                    previous_phrase = None
                    count = 0
                continue

            phrase = ' '.join(window.read_offset(count))

            if previous_phrase is None:
                model.starter_phrases.append(phrase)
            else:
                model.transitions.setdefault(previous_phrase, []).append(
                    Transition(phrase, token)
                )

            previous_phrase = phrase

            if is_sentence_terminator(token):
                previous_phrase = None
                count = 0

        # Transitions only form after a starter, so starters are checked first
        if not model.starter_phrases:
            raise NoStarterPhrases(order)
        if not model.transitions:
            raise NoPhrasesFound(order)

        logger.info(
            f"Built order-{order} model: {len(model.starter_phrases)} starter phrases, "
            f"{len(model.transitions)} transition keys"
        )
        return model


def build_model(corpus: str, order: int = 2) -> MarkovModel:
    """Build a model of the given order from raw corpus text."""
    return ModelBuilder(order=order).build(corpus)


__all__ = ["ModelBuilder", "build_model"]
