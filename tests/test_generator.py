"""
Tests for Sentence Generation
=============================
Tests for SentenceGenerator in markovtext/generator.py.

Randomness is replaced by stubs so every walk is deterministic.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from markovtext.builder import build_model
from markovtext.errors import NoModel, WordLimitExceeded
from markovtext.generator import MAX_WORD_COUNT, SentenceGenerator
from markovtext.model import MarkovModel, Transition

BRANCHING = "The big dog was happy but the small dog was very sad."
THREE_SENTENCES = "The first sentence. The second sentence. The third sentence."


class RandomStub:
    """Always returns the same value."""

    def __init__(self, value: int):
        self.value = value

    def next(self) -> int:
        return self.value


class SequenceRandom:
    """Returns scripted values, cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def next(self) -> int:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


def generator_for(corpus: str, order: int = 2, **kwargs) -> SentenceGenerator:
    return SentenceGenerator(build_model(corpus, order), **kwargs)


class TestGenerate:
    """Tests for generate()."""

    def test_first_three_sentences(self):
        """Stub values 0, 1, 2 pick the three non-branching sentences."""
        gen = generator_for(THREE_SENTENCES)
        assert gen.generate(RandomStub(0)) == "The first sentence."
        assert gen.generate(RandomStub(1)) == "The second sentence."
        assert gen.generate(RandomStub(2)) == "The third sentence."

    def test_starter_index_wraps(self):
        gen = generator_for(THREE_SENTENCES)
        assert gen.generate(RandomStub(4)) == "The second sentence."

    def test_branching_sentence(self):
        """Value 1 selects the second alternative after 'dog was'."""
        gen = generator_for(BRANCHING)
        assert gen.generate(RandomStub(1)) == "The big dog was very sad."

    def test_index_zero_end_to_end(self):
        gen = generator_for("a b c. a b d.")
        assert gen.generate(RandomStub(0)) == "a b c."

    def test_last_index_end_to_end(self):
        """An odd value always selects the last of two alternatives."""
        gen = generator_for("a b c. a b d.")
        assert gen.generate(RandomStub(2**32 - 1)) == "a b d."

    def test_scripted_choices(self):
        gen = generator_for("a b c. a b d.")
        rng = SequenceRandom([0, 1])
        assert gen.generate(rng) == "a b d."
        assert rng.calls == 2

    def test_one_draw_per_step(self):
        """One value for the starter, then one per appended word."""
        gen = generator_for(BRANCHING)
        rng = SequenceRandom([1])
        sentence = gen.generate(rng)
        assert rng.calls == 1 + len(sentence.split()) - 2

    def test_starter_without_transitions(self):
        """A starter with no transitions is returned unchanged."""
        gen = generator_for("Skip. Word sentence.", order=1)
        assert gen.generate(RandomStub(0)) == "Skip."

    def test_starter_without_transitions_manual_model(self):
        model = MarkovModel(order=2, starter_phrases=["lonely phrase"], transitions={})
        gen = SentenceGenerator(model)
        assert gen.generate(RandomStub(12345)) == "lonely phrase"

    def test_empty_transition_list_ends_sentence(self):
        """A phrase mapped to no candidates ends the walk like a missing one."""
        model = MarkovModel(
            order=2,
            starter_phrases=["a b"],
            transitions={"a b": [Transition("b c", "c")], "b c": []},
        )
        rng = SequenceRandom([0])
        assert SentenceGenerator(model).generate(rng) == "a b c"
        assert rng.calls == 2

    @pytest.mark.parametrize("order", [1, 2, 3])
    def test_three_word_sentence_all_orders(self, order):
        corpus = "Three word sentence. Three word sentence here."
        gen = generator_for(corpus, order=order)
        assert gen.generate(RandomStub(0)) == "Three word sentence."

    def test_does_not_mutate_model(self):
        model = build_model(BRANCHING, 2)
        starters = list(model.starter_phrases)
        transitions = {k: list(v) for k, v in model.transitions.items()}
        SentenceGenerator(model).generate(RandomStub(1))
        assert model.starter_phrases == starters
        assert model.transitions == transitions


class TestTermination:
    """Tests for the word limit."""

    def test_acyclic_model_terminates(self):
        gen = generator_for(THREE_SENTENCES)
        for value in range(20):
            sentence = gen.generate(RandomStub(value))
            assert len(sentence.split()) < MAX_WORD_COUNT

    def test_cycle_hits_word_limit(self):
        """Always taking 'happy' after 'dog was' loops forever."""
        gen = generator_for(BRANCHING)
        with pytest.raises(WordLimitExceeded) as exc_info:
            gen.generate(RandomStub(0))
        error = exc_info.value
        assert error.word_count == MAX_WORD_COUNT
        assert error.partial.startswith("The big dog was happy but the small dog was happy")
        assert len(error.partial.split()) == MAX_WORD_COUNT - 1

    def test_custom_word_limit(self):
        gen = generator_for(BRANCHING, max_word_count=10)
        with pytest.raises(WordLimitExceeded) as exc_info:
            gen.generate(RandomStub(0))
        assert exc_info.value.word_count == 10
        assert exc_info.value.partial == "The big dog was happy but the small dog"

    def test_word_limit_message(self):
        gen = generator_for(BRANCHING, max_word_count=10)
        with pytest.raises(WordLimitExceeded, match="Word limit 10"):
            gen.generate(RandomStub(0))

    def test_word_limit_is_runtime_error(self):
        gen = generator_for(BRANCHING, max_word_count=10)
        with pytest.raises(RuntimeError):
            gen.generate(RandomStub(0))

    def test_limit_not_hit_just_below(self):
        """'The big dog was very sad.' counts 6 words, so a limit of 7 passes."""
        gen = generator_for(BRANCHING, max_word_count=7)
        assert gen.generate(RandomStub(1)) == "The big dog was very sad."

    def test_limit_hit_at_boundary(self):
        gen = generator_for(BRANCHING, max_word_count=6)
        with pytest.raises(WordLimitExceeded):
            gen.generate(RandomStub(1))


class TestNoModel:
    """Tests for generating without a model."""

    def test_none_model(self):
        with pytest.raises(NoModel):
            SentenceGenerator(None).generate(RandomStub(0))

    def test_empty_model(self):
        with pytest.raises(NoModel):
            SentenceGenerator(MarkovModel(order=2)).generate(RandomStub(0))

    def test_no_model_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            SentenceGenerator(None).generate(RandomStub(0))


class TestSeededGeneration:
    """Tests for seed-based and batch generation."""

    @pytest.fixture
    def gen(self):
        corpus = (ROOT / "markovtext" / "resources" / "sample_corpus.txt").read_text(encoding="utf-8")
        return generator_for(corpus)

    def test_same_seed_same_sentence(self, gen):
        assert gen.generate_from_seed("6a4156e2") == gen.generate_from_seed("6a4156e2")

    def test_seeds_cover_several_starters(self, gen):
        sentences = {gen.generate_from_seed(f"seed{i}") for i in range(30)}
        assert len(sentences) > 1

    def test_batch_count(self):
        gen = generator_for(THREE_SENTENCES)
        sentences = gen.generate_batch(5, SequenceRandom([0, 1, 2, 3]))
        assert len(sentences) == 5
        assert all(sentences)

    def test_batch_uses_one_source(self):
        gen = generator_for(THREE_SENTENCES)
        rng = SequenceRandom([0, 0, 1, 0, 2, 0])
        assert gen.generate_batch(3, rng) == [
            "The first sentence.",
            "The second sentence.",
            "The third sentence.",
        ]

    def test_transition_tuple_unpacks(self):
        """Generation relies on (next_phrase, word) ordering."""
        phrase, word = Transition("b c.", "c.")
        assert (phrase, word) == ("b c.", "c.")
