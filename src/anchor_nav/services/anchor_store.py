import uuid
from collections.abc import Iterable

from anchor_nav.app.protocols import AnchorStore
from anchor_nav.domain.entities.anchor import NavigationAnchor
from anchor_nav.domain.entities.geometry import Transform


class InMemoryAnchorStore(AnchorStore):
    """Anchor geometry keyed by identifier; stands in for the map's anchor store."""

    def __init__(self, anchors: Iterable[NavigationAnchor] = ()):
        self._anchors: dict[uuid.UUID, NavigationAnchor] = {}
        for a in anchors:
            self.put(a)

    def __len__(self) -> int:
        return len(self._anchors)

    def put(self, anchor: NavigationAnchor) -> None:
        self._anchors[anchor.identifier] = anchor

    def remove(self, identifier: uuid.UUID) -> NavigationAnchor | None:
        return self._anchors.pop(identifier, None)

    def anchor(self, identifier: uuid.UUID) -> NavigationAnchor | None:
        return self._anchors.get(identifier)

    def transform(self, identifier: uuid.UUID) -> Transform | None:
        a = self._anchors.get(identifier)
        return None if a is None else a.transform
