# anchor_nav/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from anchor_nav.app.protocols import AnchorStore
from anchor_nav.config.models import NavigationModel
from anchor_nav.domain.graph import NavigationGraph
from anchor_nav.domain.hooks import NoopHooks
from anchor_nav.domain.mechanics.navigator import Navigator
from anchor_nav.domain.mechanics.navigator_factory import build_navigator
from anchor_nav.io.graph_logging import GraphLogging  # JSON logs
from anchor_nav.io.topology import TopologyModel
from anchor_nav.services.anchor_store import InMemoryAnchorStore


@dataclass
class App:
    graph: NavigationGraph
    store: AnchorStore
    navigator: Navigator

    def path(self, source=None, destination=None):
        return self.navigator.path(self.graph, source, destination)

    def trail(self, source=None, destination=None):
        return self.navigator.trail(self.graph, source, destination)


def build(
    cfg: NavigationModel | Mapping | None = None,
    *,
    topology: TopologyModel | None = None,
    store: AnchorStore | None = None,
    strict: bool = False,
    graph_id: str = "local",
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = NavigationModel()
    else:
        model = cfg if isinstance(cfg, NavigationModel) else NavigationModel.model_validate(cfg)

    # 1) Hooks
    hooks = GraphLogging.from_config(model.log, graph_id=graph_id) if use_logging else NoopHooks()

    # 2) Graph, rehydrated from the anchor store when topology is given
    store = store if store is not None else InMemoryAnchorStore()
    if topology is None:
        graph = NavigationGraph(hooks=hooks)
    else:
        graph = NavigationGraph.from_topology(topology, store, strict=strict, hooks=hooks)

    # 3) Algorithms
    navigator = build_navigator(model)

    return App(graph=graph, store=store, navigator=navigator)
