import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from graph_store import Graph  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def two_vertices():
    """A at (0, 0) and B at (100, 0), no edges"""
    graph = Graph()
    a = graph.add_vertex("A", (0, 0))
    b = graph.add_vertex("B", (100, 0))
    return graph, a, b
