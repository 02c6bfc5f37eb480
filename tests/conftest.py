"""Shared fixtures for the AlgoTrace test suite."""

import copy

import pytest

from engine import ExecutionStore, Recorder
from engine.samples import SAMPLE_GRAPH


@pytest.fixture
def sample_graph():
    """The 5-node weighted sample graph (A-E), fresh copy per test."""
    return copy.deepcopy(SAMPLE_GRAPH)


@pytest.fixture
def negative_cycle_graph():
    """Directed graph whose B → C → B loop weighs -1."""
    return {
        "nodes": [{"id": "A"}, {"id": "B"}, {"id": "C"}],
        "edges": [
            {"source": "A", "target": "B", "weight": 1},
            {"source": "B", "target": "C", "weight": -2},
            {"source": "C", "target": "B", "weight": 1},
        ],
        "startNode": "A",
    }


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return ExecutionStore(max_entries=3, ttl_seconds=60, clock=clock)


@pytest.fixture
def recorder(store):
    return Recorder(store=store)


@pytest.fixture
def app_config():
    """Settings dict shaped like config.yaml."""
    return {
        "server":    {"host": "127.0.0.1", "port": 5000, "debug": False},
        "execution": {"max_steps": 500},
        "store":     {"max_entries": 10, "ttl_seconds": 60},
        "logging":   {"level": "WARNING", "file": None},
    }


@pytest.fixture
def app(app_config):
    from main import create_app

    flask_app = create_app(app_config)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
