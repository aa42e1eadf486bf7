# anchor_nav/domain/graph.py
import logging
import uuid
from collections.abc import Iterator

import numpy as np
from numpy.typing import ArrayLike

from anchor_nav.app.protocols import AnchorStore
from anchor_nav.domain.entities.anchor import NavigationAnchor
from anchor_nav.domain.entities.route import Path, Trail
from anchor_nav.domain.hooks import GraphHooks, NoopHooks
from anchor_nav.domain.mechanics.navigator import default_navigator
from anchor_nav.io.topology import TopologyModel

log = logging.getLogger(__name__)

AnchorRef = NavigationAnchor | uuid.UUID


def _id(ref: AnchorRef) -> uuid.UUID:
    if isinstance(ref, NavigationAnchor):
        return ref.identifier
    if isinstance(ref, uuid.UUID):
        return ref
    raise TypeError(f"expected NavigationAnchor or UUID, got {type(ref).__name__}")


class NavigationGraph:
    """
    Undirected graph of navigation anchors.

    Storage is keyed by anchor identifier: ``vertices`` maps identifier to
    anchor, ``adjacency`` maps identifier to the identifiers it connects to.
    Adjacency is always symmetric and never contains self-loops.

    Vertices only exist while they have at least one edge: the first edge
    that mentions an anchor inserts it, removing its last edge evicts it.

    Not thread-safe. Mutations must not overlap a path or trail computation
    on the same graph; callers serialize access (single owner or external
    lock). Concurrent reads are fine while nothing mutates.
    """

    def __init__(self, hooks: GraphHooks | None = None):
        self.vertices: dict[uuid.UUID, NavigationAnchor] = {}
        self.adjacency: dict[uuid.UUID, list[uuid.UUID]] = {}
        self.start: uuid.UUID | None = None
        self.end: uuid.UUID | None = None
        self.hooks = hooks or NoopHooks()

    def __len__(self) -> int:
        return len(self.adjacency)

    def __contains__(self, identifier) -> bool:
        return identifier in self.adjacency

    # --------------- Edges -----------------------------

    def has_edge(self, a: AnchorRef, b: AnchorRef) -> bool:
        return _id(b) in self.adjacency.get(_id(a), ())

    def add_edge(self, source: NavigationAnchor, destination: NavigationAnchor) -> None:
        for v in (source, destination):
            if not isinstance(v, NavigationAnchor):
                raise TypeError(f"add_edge needs NavigationAnchor, got {type(v).__name__}")
        a, b = source.identifier, destination.identifier
        if a == b or self.has_edge(a, b):
            return
        self.adjacency.setdefault(a, []).append(b)
        self.adjacency.setdefault(b, []).append(a)
        # known identifiers keep their stored anchor
        self.vertices.setdefault(a, source)
        self.vertices.setdefault(b, destination)
        self.hooks.edge_added(source=a, destination=b)

    def remove_edge(self, source: AnchorRef, destination: AnchorRef) -> None:
        a, b = _id(source), _id(destination)
        if not self.has_edge(a, b):
            return
        self.adjacency[a].remove(b)
        self.adjacency[b].remove(a)
        self.hooks.edge_removed(source=a, destination=b)
        for vid in (a, b):
            if not self.adjacency[vid]:
                self._evict(vid)

    def edges(self) -> Iterator[tuple[uuid.UUID, uuid.UUID]]:
        """Each undirected edge once, in insertion order of its first endpoint."""
        seen: set[uuid.UUID] = set()
        for a, neighbors in self.adjacency.items():
            for b in neighbors:
                if b not in seen:
                    yield a, b
            seen.add(a)

    def neighbors(self, identifier: uuid.UUID) -> tuple[uuid.UUID, ...]:
        return tuple(self.adjacency.get(identifier, ()))

    # --------------- Vertices -----------------------------

    def vertex(self, ref: AnchorRef) -> NavigationAnchor | None:
        return self.vertices.get(_id(ref))

    def update_vertex(self, anchor: NavigationAnchor) -> bool:
        if not isinstance(anchor, NavigationAnchor):
            raise TypeError(f"update_vertex needs NavigationAnchor, got {type(anchor).__name__}")
        if anchor.identifier not in self.adjacency:
            return False
        self.vertices[anchor.identifier] = anchor
        self.hooks.vertex_updated(identifier=anchor.identifier)
        return True

    def remove_vertex(self, vertex: AnchorRef) -> bool:
        vid = _id(vertex)
        if vid not in self.adjacency:
            return False
        for nid in self.neighbors(vid):
            self.remove_edge(vid, nid)
        return True

    def nearest(self, point: ArrayLike) -> NavigationAnchor | None:
        if not self.vertices:
            return None
        p = np.asarray(point, dtype=np.float64)
        return min(self.vertices.values(), key=lambda v: float(np.linalg.norm(v.position - p)))

    def unresolved(self) -> list[uuid.UUID]:
        """Identifiers with edges but no anchor (after a lenient topology load)."""
        return [vid for vid in self.adjacency if vid not in self.vertices]

    def _evict(self, vid: uuid.UUID) -> None:
        del self.adjacency[vid]
        self.vertices.pop(vid, None)
        self.hooks.vertex_evicted(identifier=vid)

    # --------------- Rehydration -----------------------------

    @classmethod
    def from_topology(
        cls,
        topology: TopologyModel,
        store: AnchorStore,
        *,
        strict: bool = False,
        hooks: GraphHooks | None = None,
    ) -> "NavigationGraph":
        """
        Rebuild a graph from persisted adjacency plus anchors from ``store``.
        One-sided adjacency entries are symmetrized and self-loops dropped.
        Unresolvable identifiers raise in strict mode and stay anchorless
        otherwise.
        """
        g = cls(hooks=hooks)
        for a, neighbors in topology.adjacency.items():
            for b in neighbors:
                if a == b or g.has_edge(a, b):
                    continue
                g.adjacency.setdefault(a, []).append(b)
                g.adjacency.setdefault(b, []).append(a)
        g.start, g.end = topology.start, topology.end

        g.rehydrate(store)
        missing = g.unresolved()
        if missing:
            if strict:
                raise ValueError(f"topology references unknown anchors: {sorted(map(str, missing))}")
            log.warning("%d anchors could not be resolved from the store", len(missing))
            g.hooks.error(reason="unresolved_anchors", identifiers=[str(m) for m in missing])
        return g

    def rehydrate(self, store: AnchorStore) -> int:
        """Refresh every vertex from ``store``; returns how many were resolved."""
        resolved = 0
        for vid in self.adjacency:
            anchor = store.anchor(vid)
            if anchor is None:
                continue
            self.vertices[vid] = anchor
            resolved += 1
        return resolved

    def to_topology(self) -> TopologyModel:
        return TopologyModel(
            adjacency={a: list(ns) for a, ns in self.adjacency.items()},
            start=self.start,
            end=self.end,
        )

    # --------------- Queries -----------------------------

    def path(self) -> Path:
        return default_navigator().path(self)

    def trail(self, step_m: float = 0.5) -> Trail:
        return default_navigator(step_m=step_m).trail(self)
