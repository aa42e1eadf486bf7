import uuid
from typing import Protocol, runtime_checkable

from anchor_nav.domain.entities.anchor import NavigationAnchor
from anchor_nav.domain.entities.route import Path, Trail


@runtime_checkable
class AnchorStore(Protocol):
    """
    External owner of anchor geometry (the map's anchor store).
    Positions may be edited here without the graph knowing; the graph must be
    refreshed via ``update_vertex`` or ``rehydrate`` afterwards.
    """

    def anchor(self, identifier: uuid.UUID) -> NavigationAnchor | None: ...


@runtime_checkable
class PathFinder(Protocol):
    """
    Responsibilities:
      • Compute a path between two vertices of a NavigationGraph.
      • Report absence and unreachability as an empty Path, never raise.
    """

    def find(self, graph, source: uuid.UUID | None, destination: uuid.UUID | None) -> Path: ...


@runtime_checkable
class TrailGenerator(Protocol):
    """
    Responsibilities:
      • Resample a Path into uniformly spaced oriented poses.
    Units: meters in map space.
    """

    step_m: float

    def generate(self, path: Path) -> Trail: ...


@runtime_checkable
class Navigator(Protocol):
    """
    Convenience façade bundling a path finder and a trail generator.
    Source and destination default to the graph's start and end.
    """

    path_finder: PathFinder
    trail_generator: TrailGenerator

    def path(self, graph, source: uuid.UUID | None = None, destination: uuid.UUID | None = None) -> Path: ...
    def trail(self, graph, source: uuid.UUID | None = None, destination: uuid.UUID | None = None) -> Trail: ...
