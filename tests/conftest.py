"""Shared pytest fixtures for roadtrip tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from roadtrip.config import reset_config
from roadtrip.graph import Digraph

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Isolate tests from ROADTRIP_* variables and the cached config."""
    for name in list(os.environ):
        if name.startswith("ROADTRIP_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def orange_county_path() -> Path:
    return DATA_DIR / "orange_county.txt"


@pytest.fixture
def one_way_path() -> Path:
    return DATA_DIR / "one_way.txt"


@pytest.fixture
def chain_graph() -> Digraph[str, float]:
    """Vertices 0-3 with 0->1 (1), 1->2 (1), 0->2 (5), 2->3 (1)."""
    graph: Digraph[str, float] = Digraph()
    for vertex in range(4):
        graph.add_vertex(vertex, f"v{vertex}")
    graph.add_edge(0, 1, 1.0)
    graph.add_edge(1, 2, 1.0)
    graph.add_edge(0, 2, 5.0)
    graph.add_edge(2, 3, 1.0)
    return graph
