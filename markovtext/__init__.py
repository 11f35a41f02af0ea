#!/usr/bin/env python3
"""
MarkovText - Markov Chain Sentence Generator
============================================

Trains a fixed-order word-transition model from a text corpus and generates
new sentences by random walks over it.

Quick Start
-----------
    from markovtext import MarkovText, SeededRandom

    mt = MarkovText()
    mt.build(open("book.txt").read(), order=2)

    # Random sentence
    print(mt.generate())

    # Reproducible sentence
    print(mt.generate(seed="6a4156e2"))

Modules
-------
    markovtext.window     - Sliding window (circular buffer)
    markovtext.normalizer - Corpus cleanup and tokenization
    markovtext.builder    - Model construction
    markovtext.generator  - Random-walk sentence generation
    markovtext.entropy    - Randomness sources
    markovtext.config     - Configuration

CLI Usage
---------
    python -m markovtext generate -c book.txt -o 2
    python -m markovtext generate --seed 6a4156e2 -n 3
    python -m markovtext stats -c book.txt
"""

__version__ = "0.3.0"
__author__ = "MarkovText"

from typing import Optional

# =============================================================================
# Core Imports
# =============================================================================

from .errors import (
    MarkovTextError,
    InvalidBufferSize,
    EmptySourceCollection,
    NoPhrasesFound,
    NoStarterPhrases,
    NoModel,
    WordLimitExceeded,
)
from .window import SlidingWindow
from .normalizer import (
    SENTENCE_DELIMITERS,
    normalize,
    tokenize,
    is_sentence_terminator,
)
from .model import MarkovModel, ModelStats, Transition
from .builder import ModelBuilder, build_model
from .generator import MAX_WORD_COUNT, SentenceGenerator
from .entropy import (
    RandomSource,
    SystemRandomSource,
    SeededRandom,
    new_seed,
    get_rng,
)
from .corpus import load_corpus

# =============================================================================
# Config Imports
# =============================================================================

from .config import Config, get_config, load_env


# =============================================================================
# MarkovText Main Class
# =============================================================================

class MarkovText:
    """
    Main interface for building a model and generating sentences.

    Attributes
    ----------
    model : MarkovModel or None
        The current model; replaced wholesale on every build
    config : Config
        Defaults for order and the word limit

    Examples
    --------
        >>> mt = MarkovText("The big dog was happy. The small dog was sad.")
        >>> sentence = mt.generate(seed="abc")
    """

    def __init__(self, corpus: str = None, order: int = None, config: Config = None):
        """
        Parameters
        ----------
        corpus : str, optional
            Corpus text to build from immediately
        order : int, optional
            Phrase length; defaults to the configured order
        config : Config, optional
            Configuration; loaded from settings and environment if omitted
        """
        self._config = config or get_config()
        self._model: Optional[MarkovModel] = None
        self._generator = SentenceGenerator(None, self._config.max_word_count)

        if corpus is not None:
            self.build(corpus, order)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def model(self) -> Optional[MarkovModel]:
        return self._model

    @property
    def config(self) -> Config:
        return self._config

    @property
    def order(self) -> Optional[int]:
        return self._model.order if self._model else None

    # -------------------------------------------------------------------------
    # Build / Generate
    # -------------------------------------------------------------------------

    def build(self, corpus: str, order: int = None) -> MarkovModel:
        """
        Build a fresh model, replacing any previous one.

        The previous model stays in place if the build fails.

        Raises
        ------
        NoStarterPhrases, NoPhrasesFound, InvalidBufferSize
        """
        if order is None:
            order = self._config.order
        model = build_model(corpus, order)
        self._model = model
        self._generator = SentenceGenerator(model, self._config.max_word_count)
        return model

    def generate(self, rng: RandomSource = None, seed: str = None) -> str:
        """
        Generate one sentence.

        Parameters
        ----------
        rng : RandomSource, optional
            Randomness source; takes precedence over ``seed``
        seed : str, optional
            Seed string for a reproducible sentence

        Raises
        ------
        NoModel
            If no model has been built
        WordLimitExceeded
            If the walk runs past the word limit
        """
        if rng is None:
            rng = SeededRandom(seed) if seed is not None else get_rng()
        return self._generator.generate(rng)

    def generate_batch(self, count: int, rng: RandomSource = None, seed: str = None) -> list[str]:
        """Generate ``count`` sentences from one randomness source."""
        if rng is None:
            rng = SeededRandom(seed) if seed is not None else get_rng()
        return self._generator.generate_batch(count, rng)

    def stats(self) -> ModelStats:
        if self._model is None:
            raise NoModel()
        return self._model.stats()


__all__ = [
    "__version__",
    "MarkovText",
    # Errors
    "MarkovTextError",
    "InvalidBufferSize",
    "EmptySourceCollection",
    "NoPhrasesFound",
    "NoStarterPhrases",
    "NoModel",
    "WordLimitExceeded",
    # Core
    "SlidingWindow",
    "SENTENCE_DELIMITERS",
    "normalize",
    "tokenize",
    "is_sentence_terminator",
    "MarkovModel",
    "ModelStats",
    "Transition",
    "ModelBuilder",
    "build_model",
    "MAX_WORD_COUNT",
    "SentenceGenerator",
    # Randomness
    "RandomSource",
    "SystemRandomSource",
    "SeededRandom",
    "new_seed",
    "get_rng",
    # Corpus / config
    "load_corpus",
    "Config",
    "get_config",
    "load_env",
]
