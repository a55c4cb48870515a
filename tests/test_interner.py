from markov_text.hashing import stable_hash
from markov_text.interner import SequenceInterner
from markov_text.spans import Span


def test_stable_hash_is_deterministic_and_32_bit():
    value = stable_hash("the small dog")
    assert value == stable_hash("the small dog")
    assert -(2**31) <= value < 2**31


def test_stable_hash_depends_on_order():
    assert stable_hash("ab") != stable_hash("ba")


def test_stable_hash_of_range_matches_substring():
    text = "the big dog was happy"
    assert stable_hash(text, 4, 11) == stable_hash("big dog")


def test_equal_text_resolves_to_first_occurrence():
    corpus = "dog was happy but dog was sad"
    interner = SequenceInterner(corpus)
    first = interner.intern(Span(0, 7))
    second = interner.intern(Span(18, 25))
    assert first == Span(0, 7)
    assert second is first
    assert len(interner) == 1


def test_different_text_gets_new_identity():
    corpus = "dog was happy"
    interner = SequenceInterner(corpus)
    assert interner.intern(Span(0, 3)) == Span(0, 3)
    assert interner.intern(Span(4, 7)) == Span(4, 7)
    assert len(interner) == 2


def test_hash_collisions_fall_back_to_text_comparison(monkeypatch):
    monkeypatch.setattr("markov_text.interner.stable_hash", lambda *args, **kwargs: 0)
    corpus = "cat dog cat"
    interner = SequenceInterner(corpus)
    cat = interner.intern(Span(0, 3))
    dog = interner.intern(Span(4, 7))
    assert dog == Span(4, 7)
    assert interner.intern(Span(8, 11)) is cat
    assert len(interner) == 2
