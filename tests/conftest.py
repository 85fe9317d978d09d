"""
Shared fixtures for the organizer test suite.

Trees are built with the small folder()/playlist() helpers so each test
reads like the hierarchy it exercises.
"""

import pytest

from organizer.core.log import Log
from organizer.core.store import TreeStore
from organizer.core.tree import Node, NodeKind
from organizer.ui.drag_drop import DragController


def folder(node_id, *children, title=None):
    return Node(id=node_id, kind=NodeKind.CONTAINER, title=title or node_id, children=children)


def playlist(node_id, title=None):
    return Node(id=node_id, kind=NodeKind.LEAF, title=title or node_id)


@pytest.fixture(autouse=True)
def quiet_log():
    """Keep log verbosity at its default between tests."""
    Log.set_verbosity(0)
    yield
    Log.set_verbosity(0)


@pytest.fixture
def scenario_tree():
    """F1[F2[P1], P2]"""
    return (folder("F1", folder("F2", playlist("P1")), playlist("P2")),)


@pytest.fixture
def deep_tree():
    """F1[F2[F3[F4[P1]]], P2] plus a second root folder R2[]"""
    return (
        folder("F1", folder("F2", folder("F3", folder("F4", playlist("P1")))), playlist("P2")),
        folder("R2"),
    )


@pytest.fixture
def controller(scenario_tree):
    return DragController(TreeStore(scenario_tree))
