# anchor_nav/domain/entities/anchor.py
import uuid
from dataclasses import dataclass, field
from typing import Any

from anchor_nav.domain.entities.geometry import (
    Transform,
    Vec3,
    as_transform,
    distance,
    identity,
    position,
)


@dataclass(eq=False)
class NavigationAnchor:
    """
    A navigation waypoint in map space.

    Identity is the ``identifier`` alone: equality and hashing ignore the
    transform, name and payload, which may all change over time.
    """

    transform: Transform = field(default_factory=identity)
    identifier: uuid.UUID = field(default_factory=uuid.uuid4)
    name: str | None = None
    payload: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.transform = as_transform(self.transform)

    def __eq__(self, other):
        if not isinstance(other, NavigationAnchor):
            return NotImplemented
        return self.identifier == other.identifier

    def __hash__(self):
        return hash(self.identifier)

    @property
    def position(self) -> Vec3:
        return position(self.transform)

    def distance(self, other: "NavigationAnchor") -> float:
        return distance(self.transform, other.transform)

    def copy(self, **changes) -> "NavigationAnchor":
        # same identity, fresh containers
        return NavigationAnchor(
            transform=changes.get("transform", self.transform.copy()),
            identifier=self.identifier,
            name=changes.get("name", self.name),
            payload=changes.get("payload", dict(self.payload)),
        )
