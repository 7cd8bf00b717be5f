# core/aabb.py
import math
from core.vector import Vector3


def _reciprocal(d: float) -> float:
    # IEEE-754 division: 1/±0 is ±inf. Python floats raise instead.
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


class AABB:
    """Axis-aligned bounding box. May be degenerate (zero thickness on an axis)."""

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab test: intersect [t_min, t_max] with each axis interval in turn.
        for a in range(3):
            inv_d = _reciprocal(ray.direction[a])
            t0 = (self.minimum[a] - ray.origin[a]) * inv_d
            t1 = (self.maximum[a] - ray.origin[a]) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def corners(self):
        """The eight corner points of the box."""
        for i in range(2):
            for j in range(2):
                for k in range(2):
                    yield Vector3(
                        self.maximum.x if i else self.minimum.x,
                        self.maximum.y if j else self.minimum.y,
                        self.maximum.z if k else self.minimum.z,
                    )

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        """Smallest box containing both boxes."""
        return AABB(Vector3(*map(min, box0.minimum, box1.minimum)),
                    Vector3(*map(max, box0.maximum, box1.maximum)))
