import numpy as np

from anchor_nav.app.protocols import TrailGenerator
from anchor_nav.domain.entities.geometry import UP, Vec3, from_axes
from anchor_nav.domain.entities.route import Path, Trail

_EPS = 1e-9
_FALLBACK_RIGHT = np.array([1.0, 0.0, 0.0])


def segment_axes(direction: Vec3) -> tuple[Vec3, Vec3, Vec3]:
    """
    Right-handed basis for travel along ``direction`` (unit length).
    x = direction × up, y = x × direction, z = x × y = -direction, so a pose
    built from these axes looks down its -z axis along the direction of travel.
    """
    x = np.cross(direction, UP)
    n = np.linalg.norm(x)
    # straight up or down: direction × up vanishes
    x = _FALLBACK_RIGHT if n < _EPS else x / n
    y = np.cross(x, direction)
    z = np.cross(x, y)
    return x, y, z


class FixedStepTrailGenerator(TrailGenerator):
    def __init__(self, step_m: float = 0.5):
        if not step_m > 0:
            raise ValueError(f"step_m must be > 0, got {step_m!r}")
        self.step_m = float(step_m)

    def generate(self, path: Path) -> Trail:
        poses = []
        if len(path) < 2:
            return Trail(poses, self.step_m)

        previous = path[0]
        carry = 0.0  # offset of the first pose into the current segment
        for vertex in path.vertices[1:]:
            start = previous.position
            displacement = vertex.position - start
            length = float(np.linalg.norm(displacement))
            previous = vertex
            if length < _EPS:
                continue

            direction = displacement / length
            x, y, z = segment_axes(direction)
            # whole steps from the carry, so poses stay on exact multiples of step_m
            k = 0
            while carry + k * self.step_m <= length + _EPS:
                offset = min(carry + k * self.step_m, length)
                poses.append(from_axes(x, y, z, start + direction * offset))
                k += 1
            carry = max(carry + k * self.step_m - length, 0.0)

        return Trail(poses, self.step_m)
