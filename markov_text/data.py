"""Utility helpers to load text corpora for Markov Text."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

_DEFAULT_CORPUS = Path(__file__).resolve().parent / "resources" / "sample_corpus.txt"

PathLike = Union[str, Path]


def load_corpus(paths: PathLike | Iterable[PathLike] | None = None) -> str:
    """Load one or more corpus files, or the bundled sample, as one string.

    Several files are joined with newlines so that the last sentence of one
    file and the first of the next stay separate words.
    """
    if paths is None:
        corpus_paths: List[Path] = [_DEFAULT_CORPUS]
    elif isinstance(paths, (str, Path)):
        corpus_paths = [Path(paths)]
    else:
        corpus_paths = [Path(path) for path in paths]

    texts = []
    for corpus_path in corpus_paths:
        if not corpus_path.exists():
            raise FileNotFoundError(f"Corpus file not found: {corpus_path}")
        texts.append(corpus_path.read_text(encoding="utf-8"))
    return "\n".join(texts)
