import pytest

from markov_text.normalizer import normalize


def test_line_breaks_become_spaces():
    assert normalize("The lamp\nburned all\r\nnight.") == "The lamp burned all night."


def test_annotations_and_quote_marks_are_removed():
    text = '[Page 12] He said "go" (quietly) to the keeper’s boy_'
    assert normalize(text) == "He said go quietly to the keepers boy"


def test_whitespace_runs_collapse_and_are_trimmed():
    assert normalize("  one \t two   three  ") == "one two three"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "plain text.",
        '[a(]b] "quoted" (paren)\n\nnext line',
        "[]' stray [bracket",
        "“Curly” quotes\tand\ttabs ’",
    ],
)
def test_normalize_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once
