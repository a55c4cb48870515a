import pytest

from markov_text import (
    ArrayChainModel,
    ChainConfig,
    InsufficientCorpusError,
    SpanChainModel,
    StringChainModel,
    build,
    load_corpus,
)
from markov_text.spans import Span

CORPUS = "The big dog was happy but the small dog was very sad."


def test_config_validation():
    ChainConfig(order=1, max_word_count=1).validate()
    with pytest.raises(ValueError):
        ChainConfig(order=0).validate()
    with pytest.raises(ValueError):
        ChainConfig(max_word_count=0).validate()


def test_build_rejects_invalid_config():
    with pytest.raises(ValueError):
        build(CORPUS, 0)


def test_unknown_representation():
    with pytest.raises(ValueError, match="Unknown representation"):
        build(CORPUS, representation="rope")


@pytest.mark.parametrize(
    "name, model_cls",
    [("span", SpanChainModel), ("string", StringChainModel), ("array", ArrayChainModel)],
)
def test_build_selects_representation(name, model_cls):
    model = build(CORPUS, representation=name)
    assert isinstance(model, model_cls)
    assert model.order == 2
    assert model.word_count == 12


def test_span_states_are_interned_offsets():
    model = build(CORPUS)
    dog_was = [state for state in model.transitions if model.state_text(state) == "dog was"]
    assert dog_was == [Span(8, 15)]
    successors = model.successors(Span(8, 15))
    assert [model.state_text(state) for state in successors] == ["was happy", "was very"]
    assert [model.last_word(state) for state in successors] == ["happy", "very"]


def test_model_owns_normalized_corpus():
    model = build('The "big" dog\nwas [note] sad.')
    assert model.corpus == "The big dog was sad."
    assert model.state_text(model.starters[0]) == "The big"


def test_model_tables_are_read_only():
    model = build(CORPUS)
    with pytest.raises(TypeError):
        model.transitions[Span(0, 1)] = ()
    assert isinstance(model.starters, tuple)


def test_representations_share_table_shape():
    models = [build(CORPUS, representation=name) for name in ("span", "string", "array")]
    shapes = [
        sorted(
            (model.state_text(state), [model.state_text(s) for s in successors])
            for state, successors in model.transitions.items()
        )
        for model in models
    ]
    assert shapes[0] == shapes[1] == shapes[2]


def test_sample_corpus_builds():
    model = build(load_corpus(), 3)
    assert len(model.starters) > 10


def test_model_class_build_uses_default_config():
    model = StringChainModel.build("Word sentence here.")
    assert model.config == ChainConfig()
    with pytest.raises(InsufficientCorpusError):
        ArrayChainModel.build("Word.")
