#!/usr/bin/env python3
"""
Markov Model
============
Word-level Markov chain data: sentence starter phrases and phrase transitions.

A phrase is ``order`` consecutive tokens joined by single spaces. Each
transition records the phrase that follows and the word that was appended to
reach it, e.g. "the big dog" -> ("big dog was", "was").

Duplicates are kept on purpose in both collections: sampling uniformly from a
list with repeats reproduces the observed frequencies.
"""

from dataclasses import dataclass, field
from typing import NamedTuple


class Transition(NamedTuple):
    """Phrase reached after appending ``word`` to the source phrase."""
    next_phrase: str
    word: str


@dataclass
class ModelStats:
    """Summary counts of a built model."""
    order: int
    starter_phrases: int
    unique_starter_phrases: int
    transition_keys: int
    total_transitions: int
    branching_phrases: int
    tokens: int = 0

    def to_dict(self) -> dict:
        return {
            'order': self.order,
            'tokens': self.tokens,
            'starter_phrases': self.starter_phrases,
            'unique_starter_phrases': self.unique_starter_phrases,
            'transition_keys': self.transition_keys,
            'total_transitions': self.total_transitions,
            'branching_phrases': self.branching_phrases,
        }


@dataclass
class MarkovModel:
    """Word-level Markov chain model"""
    order: int
    starter_phrases: list = field(default_factory=list)
    transitions: dict = field(default_factory=dict)
    # Tokens scanned during the build
    token_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.starter_phrases

    def transitions_for(self, phrase: str) -> list:
        """Transitions observed after ``phrase`` (empty list if none)."""
        return self.transitions.get(phrase, [])

    def stats(self) -> ModelStats:
        return ModelStats(
            order=self.order,
            starter_phrases=len(self.starter_phrases),
            unique_starter_phrases=len(set(self.starter_phrases)),
            transition_keys=len(self.transitions),
            total_transitions=sum(len(t) for t in self.transitions.values()),
            branching_phrases=sum(
                1 for t in self.transitions.values() if len(set(t)) > 1
            ),
            tokens=self.token_count,
        )


__all__ = ["Transition", "ModelStats", "MarkovModel"]
