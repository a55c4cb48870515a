from __future__ import annotations

import pytest

from markov_text import REPRESENTATIONS, load_corpus


@pytest.fixture(params=sorted(REPRESENTATIONS))
def representation(request) -> str:
    return request.param


@pytest.fixture(scope="session")
def sample_corpus() -> str:
    return load_corpus()
