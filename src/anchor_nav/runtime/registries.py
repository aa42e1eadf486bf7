# runtime/registries.py
from collections.abc import Callable
from typing import Any

from anchor_nav.app.protocols import PathFinder, TrailGenerator
from anchor_nav.config.models import (
    AStarPathFinderModel,
    BreadthFirstPathFinderModel,
    FixedStepTrailModel,
    PathFinderUnion,
    TrailGeneratorUnion,
)
from anchor_nav.domain.mechanics.path_finders import AStarPathFinder, BreadthFirstPathFinder
from anchor_nav.domain.mechanics.trail_generators import FixedStepTrailGenerator

PathFinderFactory = Callable[[PathFinderUnion, dict[str, Any]], PathFinder]
TrailGeneratorFactory = Callable[[TrailGeneratorUnion, dict[str, Any]], TrailGenerator]

_path_finder_registry: dict[str, PathFinderFactory] = {}
_trail_generator_registry: dict[str, TrailGeneratorFactory] = {}


# --------------------- Path Finders ---------------------


def register_path_finder(kind: str):
    def deco(fn: PathFinderFactory):
        _path_finder_registry[kind] = fn
        return fn

    return deco


def make_path_finder(cfg: PathFinderUnion, *, deps: dict | None = None) -> PathFinder:
    try:
        factory = _path_finder_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown path finder kind {cfg.kind!r}") from None
    return factory(cfg, deps or {})


@register_path_finder("astar")
def _make_astar(cfg: AStarPathFinderModel, deps):
    return AStarPathFinder(max_expansions=cfg.max_expansions)


@register_path_finder("bfs")
def _make_bfs(cfg: BreadthFirstPathFinderModel, deps):
    return BreadthFirstPathFinder()


# ---------------------- Trail Generators ----------------------------


def register_trail_generator(kind: str):
    def deco(fn: TrailGeneratorFactory):
        _trail_generator_registry[kind] = fn
        return fn

    return deco


def make_trail_generator(cfg: TrailGeneratorUnion, *, deps: dict | None = None) -> TrailGenerator:
    try:
        factory = _trail_generator_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown trail generator kind {cfg.kind!r}") from None
    return factory(cfg, deps or {})


@register_trail_generator("fixed_step")
def _make_fixed_step(cfg: FixedStepTrailModel, deps):
    return FixedStepTrailGenerator(step_m=cfg.step_m)
