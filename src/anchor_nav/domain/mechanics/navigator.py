# anchor_nav/domain/mechanics/navigator.py
import time
from dataclasses import dataclass

from anchor_nav.app.protocols import Navigator, PathFinder, TrailGenerator
from anchor_nav.domain.entities.route import Path, Trail
from anchor_nav.domain.mechanics.path_finders import AStarPathFinder
from anchor_nav.domain.mechanics.trail_generators import FixedStepTrailGenerator


@dataclass
class Navigator(Navigator):
    path_finder: PathFinder
    trail_generator: TrailGenerator

    def path(self, graph, source=None, destination=None) -> Path:
        source = graph.start if source is None else source
        destination = graph.end if destination is None else destination
        return self.path_finder.find(graph, source, destination)

    def trail(self, graph, source=None, destination=None) -> Trail:
        return self.path_and_trail(graph, source, destination)[1]

    def path_and_trail(self, graph, source=None, destination=None) -> tuple[Path, Trail]:
        path = self.path(graph, source, destination)
        t0 = time.perf_counter()
        trail = self.trail_generator.generate(path)
        graph.hooks.trail_built(
            poses=len(trail),
            step_m=trail.step_m,
            ms=(time.perf_counter() - t0) * 1000,
        )
        return path, trail


def default_navigator(step_m: float = 0.5) -> Navigator:
    return Navigator(
        path_finder=AStarPathFinder(),
        trail_generator=FixedStepTrailGenerator(step_m=step_m),
    )
