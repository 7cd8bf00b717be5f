# geometry/bvh.py
import random
from typing import List, Optional
from core.aabb import AABB
from core.ray import Ray
from core.utils import thread_rng
from geometry.hittable import Hittable, HitRecord


class BVHConstructionError(RuntimeError):
    """Raised when a BVH cannot be built over the given objects."""


def _required_box(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise BVHConstructionError(f"No bounding box for {obj!r} in BVH node")
    return box


class BVHNode(Hittable):
    """
    Bounding volume hierarchy node: either a leaf wrapping one object or a
    branch with two child nodes. Built once by median split, immutable after.

    split_axes: the split axis of each branch is drawn uniformly from
        range(split_axes). The default of 2 never splits on Z.
    nearest_hit: when False a hit in the left subtree is returned even if the
        right subtree reported a closer one inside the narrowed interval.
        Set True to return whichever of the two is closer.
    """
    def __init__(self, objects: List[Hittable], time0: float = 0.0, time1: float = 0.0,
                 split_axes: int = 2, nearest_hit: bool = False,
                 rng: Optional[random.Random] = None):
        if not 1 <= split_axes <= 3:
            raise ValueError(f"split_axes must be 1, 2 or 3, got {split_axes}")
        objects = list(objects)
        if len(objects) == 0:
            raise BVHConstructionError("No objects in the scene")
        rng = rng or thread_rng()
        self.nearest_hit = nearest_hit

        if len(objects) == 1:
            self.is_leaf = True
            self.object = objects[0]
            self.left = self.right = None
            self.box = _required_box(self.object, time0, time1)
            return

        axis = rng.randrange(split_axes)
        boxes = {id(obj): _required_box(obj, time0, time1) for obj in objects}
        # Sorting on min+max is sorting on the box centroid.
        objects.sort(key=lambda obj: boxes[id(obj)].minimum[axis] + boxes[id(obj)].maximum[axis])

        mid = len(objects) // 2
        options = dict(split_axes=split_axes, nearest_hit=nearest_hit, rng=rng)
        self.is_leaf = False
        self.object = None
        self.axis = axis
        self.left = BVHNode(objects[:mid], time0, time1, **options)
        self.right = BVHNode(objects[mid:], time0, time1, **options)
        self.box = AABB.surrounding_box(self.left.box, self.right.box)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        if self.is_leaf:
            return self.object.hit(ray, t_min, t_max, rng)

        hit_left = self.left.hit(ray, t_min, t_max, rng)

        # The right subtree cannot report anything farther than the left hit.
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max, rng)

        if hit_left is None:
            return hit_right
        if self.nearest_hit and hit_right is not None and hit_right.t < hit_left.t:
            return hit_right
        return hit_left

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return self.box

    def depth(self) -> int:
        if self.is_leaf:
            return 1
        return 1 + max(self.left.depth(), self.right.depth())

    def leaves(self):
        """Yield the wrapped objects in left-to-right order."""
        if self.is_leaf:
            yield self.object
            return
        yield from self.left.leaves()
        yield from self.right.leaves()
