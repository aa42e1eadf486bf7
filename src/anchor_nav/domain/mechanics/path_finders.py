import heapq
import logging
import time
import uuid
from collections import deque

from anchor_nav.app.protocols import PathFinder
from anchor_nav.domain.entities.route import Path

log = logging.getLogger(__name__)


def _endpoints(graph, source, destination):
    src = graph.vertex(source) if source is not None else None
    dst = graph.vertex(destination) if destination is not None else None
    return src, dst


def _backtrack(graph, parents: dict[uuid.UUID, uuid.UUID | None], last: uuid.UUID) -> Path:
    ids = [last]
    parent = parents[last]
    while parent is not None:
        ids.append(parent)
        parent = parents[parent]
    return Path([graph.vertex(i) for i in reversed(ids)])


class _TimedSearch:
    """
    Timing and hook reporting around a search. Subclasses set ``kind`` and
    implement ``_search(graph, source, destination)`` returning the path and
    the number of expanded vertices.
    """

    kind: str

    def find(self, graph, source, destination) -> Path:
        t0 = time.perf_counter()
        graph.hooks.search_start(
            finder=self.kind,
            source=getattr(source, "identifier", source),
            destination=getattr(destination, "identifier", destination),
        )
        path, expanded = self._search(graph, source, destination)
        graph.hooks.search_end(
            finder=self.kind,
            found=bool(path),
            hops=max(0, len(path) - 1),
            length_m=path.total_length_m,
            expanded=expanded,
            ms=(time.perf_counter() - t0) * 1000,
        )
        return path


class AStarPathFinder(_TimedSearch, PathFinder):
    """
    A* over straight-line distances.

    Edge cost and heuristic are both the Euclidean distance between anchor
    positions. Vertices are re-enqueued on every discovery and stale entries
    are skipped on pop; equal priorities pop in insertion order.
    """

    kind = "astar"

    def __init__(self, max_expansions: int | None = None):
        self.max_expansions = max_expansions

    def _search(self, graph, source, destination):
        src, dst = _endpoints(graph, source, destination)
        if src is None or dst is None:
            return Path(), 0
        if src == dst:
            return Path([src]), 0

        parents: dict[uuid.UUID, uuid.UUID | None] = {}
        # (g + h, seq, g, vertex id, parent id)
        q: list[tuple[float, int, float, uuid.UUID, uuid.UUID | None]] = [
            (src.distance(dst), 0, 0.0, src.identifier, None)
        ]
        seq, expanded = 0, 0
        while q:
            _, _, g, vid, parent = heapq.heappop(q)
            if vid in parents:
                continue
            parents[vid] = parent
            if vid == dst.identifier:
                return _backtrack(graph, parents, vid), expanded

            expanded += 1
            if self.max_expansions is not None and expanded > self.max_expansions:
                log.warning("A* expansion budget of %d exhausted", self.max_expansions)
                return Path(), expanded

            vertex = graph.vertex(vid)
            for nid in graph.neighbors(vid):
                if nid in parents:
                    continue
                adjacent = graph.vertex(nid)
                if adjacent is None:  # unresolved after a lenient topology load
                    continue
                g_next = g + vertex.distance(adjacent)
                seq += 1
                heapq.heappush(q, (g_next + adjacent.distance(dst), seq, g_next, nid, vid))

        return Path(), expanded


class BreadthFirstPathFinder(_TimedSearch, PathFinder):
    """Fewest-hops path; ignores geometry."""

    kind = "bfs"

    def _search(self, graph, source, destination):
        src, dst = _endpoints(graph, source, destination)
        if src is None or dst is None:
            return Path(), 0
        if src == dst:
            return Path([src]), 0

        parents: dict[uuid.UUID, uuid.UUID | None] = {src.identifier: None}
        queue = deque([src.identifier])
        expanded = 0
        while queue:
            vid = queue.popleft()
            if vid == dst.identifier:
                return _backtrack(graph, parents, vid), expanded
            expanded += 1
            for nid in graph.neighbors(vid):
                if nid in parents or graph.vertex(nid) is None:
                    continue
                parents[nid] = vid
                queue.append(nid)

        return Path(), expanded
