# anchor_nav/domain/entities/route.py
import uuid
from dataclasses import dataclass, field

from anchor_nav.domain.entities.anchor import NavigationAnchor
from anchor_nav.domain.entities.geometry import Transform, Vec3, position


@dataclass
class Path:
    vertices: list[NavigationAnchor] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def __getitem__(self, i):
        return self.vertices[i]

    def __bool__(self) -> bool:
        return bool(self.vertices)

    @property
    def identifiers(self) -> list[uuid.UUID]:
        return [v.identifier for v in self.vertices]

    @property
    def total_length_m(self) -> float:
        return sum(a.distance(b) for a, b in zip(self.vertices, self.vertices[1:]))


@dataclass
class Trail:
    poses: list[Transform] = field(default_factory=list)
    step_m: float = 0.5

    def __len__(self) -> int:
        return len(self.poses)

    def __iter__(self):
        return iter(self.poses)

    def __getitem__(self, i):
        return self.poses[i]

    def positions(self) -> list[Vec3]:
        return [position(p) for p in self.poses]
