import copy

import pytest
from fastapi.testclient import TestClient

from bloglist.adapters.memory_adapter import InMemoryBlogAdapter
from main import create_app
from seed_blogs import INITIAL_BLOGS


@pytest.fixture
def initial_blogs():
    return copy.deepcopy(INITIAL_BLOGS)


@pytest.fixture
def store(initial_blogs):
    """A fresh store holding the three seed blogs."""
    return InMemoryBlogAdapter(initial_blogs)


@pytest.fixture
def client(store):
    app = create_app(store=store)
    with TestClient(app) as c:
        yield c
