# anchor_nav/domain/mechanics/navigator_factory.py

from anchor_nav.config.models import NavigationModel
from anchor_nav.domain.mechanics.navigator import Navigator
from anchor_nav.runtime.registries import make_path_finder, make_trail_generator


def build_navigator(cfg: NavigationModel | None = None) -> Navigator:
    cfg = cfg or NavigationModel()
    return Navigator(
        path_finder=make_path_finder(cfg.path_finder),
        trail_generator=make_trail_generator(cfg.trail_generator),
    )
