"""Shared graph fixtures."""
import pytest

from graphprops import UndirectedGraph


@pytest.fixture
def triangle():
    """K3 on a, b, c."""
    return UndirectedGraph({"a": ["b", "c"], "b": ["c"], "c": []})


@pytest.fixture
def chordal_graph():
    """Two triangles sharing b-c plus a third triangle b-d-e."""
    return UndirectedGraph({"a": ["b", "c"], "b": ["c", "d", "e"], "c": ["d"], "d": ["e"], "e": []})


@pytest.fixture
def comparability_graph():
    """7-cycle a..g with the chord d-f."""
    return UndirectedGraph({
        "a": ["b", "g"], "b": ["c"], "c": ["d"], "d": ["e", "f"], "e": ["f"], "f": ["g"], "g": []
    })


@pytest.fixture
def odd_cycle():
    """Chordless 7-cycle a..g."""
    return UndirectedGraph({
        "a": ["b", "g"], "b": ["c"], "c": ["d"], "d": ["e"], "e": ["f"], "f": ["g"], "g": []
    })
