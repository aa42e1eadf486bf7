# anchor_nav/domain/hooks.py
from typing import Protocol


class GraphHooks(Protocol):
    def edge_added(self, *, source, destination): ...
    def edge_removed(self, *, source, destination): ...
    def vertex_evicted(self, *, identifier): ...
    def vertex_updated(self, *, identifier): ...
    def search_start(self, *, finder, source, destination): ...
    def search_end(self, *, finder, found, hops, length_m, expanded, ms): ...
    def trail_built(self, *, poses, step_m, ms): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def edge_added(self, **_):
        pass

    def edge_removed(self, **_):
        pass

    def vertex_evicted(self, **_):
        pass

    def vertex_updated(self, **_):
        pass

    def search_start(self, **_):
        pass

    def search_end(self, **_):
        pass

    def trail_built(self, **_):
        pass

    def error(self, **_):
        pass
