# tests/domain/test_path_finders.py
import math
import uuid

import pytest

from anchor_nav.domain.entities.anchor import NavigationAnchor
from anchor_nav.domain.entities.geometry import from_position
from anchor_nav.domain.graph import NavigationGraph
from anchor_nav.domain.mechanics.navigator import default_navigator
from anchor_nav.domain.mechanics.path_finders import AStarPathFinder, BreadthFirstPathFinder


def _at(x, y, z) -> NavigationAnchor:
    return NavigationAnchor(transform=from_position(x, y, z))


def _graph(edges, start=None, end=None) -> NavigationGraph:
    g = NavigationGraph()
    for a, b in edges:
        g.add_edge(a, b)
    g.start = start.identifier if start else None
    g.end = end.identifier if end else None
    return g


@pytest.fixture
def abc():
    a, b, c = _at(0, 0, 0), _at(10, 0, 0), _at(10, 0, 10)
    return a, b, c, _graph([(a, b), (b, c)], start=a, end=c)


# ---------- Known shortest paths


def test_abc_scenario(abc):
    a, b, c, g = abc
    path = g.path()
    assert path.vertices == [a, b, c]
    assert math.isclose(path.total_length_m, 20.0)


def test_star_with_diagonal():
    # Top view
    # 4 - 1 - 3
    #     | /
    #     2
    a1, a2, a3, a4 = _at(0, 0, 0), _at(0, 0, 1), _at(1, 0, 0), _at(-1, 0, 0)
    g = _graph([(a1, a2), (a1, a3), (a1, a4), (a2, a3)], start=a2, end=a4)
    assert g.path().vertices == [a2, a1, a4]


def test_prefers_shorter_longer_hop_route():
    # 4 - 5
    # |   |
    # |   1
    # | /   \
    # 3 - - - 2
    a1, a2, a3 = _at(0, 0, 0), _at(1, 0, 1), _at(-1, 0, 1)
    a4, a5 = _at(-1, 0, -1), _at(0, 0, -1)
    g = _graph(
        [(a1, a2), (a1, a3), (a1, a5), (a2, a3), (a3, a4), (a4, a5)], start=a2, end=a4
    )
    path = g.path()
    assert path.vertices == [a2, a1, a5, a4]
    assert math.isclose(path.total_length_m, math.sqrt(2) + 2.0)

    # fewest hops goes the other way round
    bfs = BreadthFirstPathFinder().find(g, g.start, g.end)
    assert bfs.vertices == [a2, a3, a4]


def test_prefers_fewer_hops_when_shorter():
    # 4 - - - 5
    # |     /
    # |   1
    # | /   \
    # 3 - - - 2
    a1, a2, a3 = _at(0, 0, 0), _at(1, 0, 1), _at(-1, 0, 1)
    a4, a5 = _at(-1, 0, -1), _at(1, 0, -1)
    g = _graph(
        [(a1, a2), (a1, a3), (a1, a5), (a2, a3), (a3, a4), (a4, a5)], start=a2, end=a4
    )
    assert g.path().vertices == [a2, a3, a4]


def test_path_length_is_sum_of_hops():
    pts = [_at(0, 0, 0), _at(3, 0, 4), _at(3, 1, 4), _at(6, 1, 8)]
    shortcut_bait = _at(50, 0, 0)
    g = _graph(list(zip(pts, pts[1:])) + [(pts[0], shortcut_bait)], start=pts[0], end=pts[-1])
    path = g.path()
    assert path.vertices == pts
    assert math.isclose(path.total_length_m, 5.0 + 1.0 + 5.0)


# ---------- Degenerate inputs


def test_source_equals_destination(abc):
    a, _, _, g = abc
    path = AStarPathFinder().find(g, a.identifier, a.identifier)
    assert path.vertices == [a]
    assert path.total_length_m == 0.0


def test_disconnected_components():
    a, b, c, d = _at(0, 0, 0), _at(1, 0, 0), _at(5, 0, 0), _at(6, 0, 0)
    g = _graph([(a, b), (c, d)], start=a, end=d)
    assert len(g.path()) == 0
    assert len(BreadthFirstPathFinder().find(g, a.identifier, d.identifier)) == 0


@pytest.mark.parametrize("finder", [AStarPathFinder(), BreadthFirstPathFinder()])
def test_absent_endpoints_give_empty_path(abc, finder):
    a, _, c, g = abc
    assert len(finder.find(g, uuid.uuid4(), c.identifier)) == 0
    assert len(finder.find(g, a.identifier, uuid.uuid4())) == 0
    assert len(finder.find(g, None, c.identifier)) == 0
    assert not finder.find(NavigationGraph(), a.identifier, c.identifier)


def test_path_after_removing_bridge(abc):
    a, b, c, g = abc
    g.remove_edge(b, c)
    assert len(g.path()) == 0


def test_path_sees_updated_positions():
    a, far, near, z = _at(0, 0, 0), _at(0, 0, 10), _at(0, 0, 2), _at(4, 0, 0)
    g = _graph([(a, far), (far, z), (a, near), (near, z)], start=a, end=z)
    assert g.path().vertices == [a, near, z]

    g.update_vertex(far.copy(transform=from_position(2, 0, 0)))
    g.update_vertex(near.copy(transform=from_position(0, 0, 9)))
    assert g.path().identifiers == [a.identifier, far.identifier, z.identifier]


# ---------- Expansion budget


def test_expansion_budget():
    a, b, c = _at(0, 0, 0), _at(1, 0, 0), _at(2, 0, 0)
    g = _graph([(a, b), (b, c)])
    assert len(AStarPathFinder(max_expansions=1).find(g, a.identifier, c.identifier)) == 0
    assert AStarPathFinder(max_expansions=2).find(g, a.identifier, c.identifier).vertices == [a, b, c]


def test_search_reports_to_hooks(abc):
    a, _, c, g = abc
    seen = {}

    class _Hooks:
        def search_start(self, **kw):
            seen["start"] = kw

        def search_end(self, **kw):
            seen["end"] = kw

    g.hooks = _Hooks()
    AStarPathFinder().find(g, a.identifier, c.identifier)
    assert seen["start"]["finder"] == "astar"
    assert seen["end"]["found"] is True
    assert seen["end"]["hops"] == 2
    assert math.isclose(seen["end"]["length_m"], 20.0)


# ---------- Endpoint arguments


@pytest.mark.parametrize("finder", [AStarPathFinder(), BreadthFirstPathFinder()])
def test_endpoints_may_be_anchors(abc, finder):
    a, b, c, g = abc
    assert finder.find(g, a, c).vertices == [a, b, c]
    assert finder.find(g, a.identifier, c).vertices == [a, b, c]


def test_navigator_accepts_anchors(abc):
    a, b, c, g = abc
    path, trail = default_navigator(step_m=5.0).path_and_trail(g, c, a)
    assert path.vertices == [c, b, a]
    assert len(trail) == 5


def test_endpoints_of_the_wrong_type_raise(abc):
    a, _, c, g = abc
    with pytest.raises(TypeError):
        AStarPathFinder().find(g, str(a.identifier), c.identifier)
