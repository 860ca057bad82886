# -*- encoding: utf-8 -*-
#
# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

from dataclasses import dataclass
from typing import Iterable, Union

from phongtracer.geometry import Tuple
from phongtracer.misc import EPSILON
from phongtracer.ray import Ray


@dataclass
class PrecomputedData:
    """
    Quantities needed to shade the point where a ray hit a shape

    The fields defined in this dataclass are the following:

    -   `t`: the distance along the ray where the hit happened
    -   `object`: the :class:`.Shape` that was hit
    -   `point`: the hit point in world coordinates
    -   `eyev`: the normalized vector pointing from the hit point towards the observer
    -   `normalv`: the normal to the surface, always facing the observer
    -   `inside`: True if the ray hit the surface from the inside (and `normalv` was flipped)
    -   `over_point`: `point` moved by a tiny amount along `normalv`. Shadow rays must start from
        here, otherwise rounding errors would make the surface shadow itself («shadow acne»)
    """
    t: float
    object: "Shape"
    point: Tuple
    eyev: Tuple
    normalv: Tuple
    inside: bool
    over_point: Tuple


@dataclass
class Intersection:
    """A ray-shape intersection at distance `t` along the ray"""
    t: float
    object: "Shape"

    def prepare_computations(self, ray: Ray) -> PrecomputedData:
        """Compute the data needed to shade this intersection, given the ray that produced it"""
        point = ray.position(self.t)
        eyev = -ray.direction
        normalv = self.object.normal_at(point)

        inside = normalv.dot(eyev) < 0.0
        if inside:
            normalv = -normalv

        return PrecomputedData(
            t=self.t,
            object=self.object,
            point=point,
            eyev=eyev,
            normalv=normalv,
            inside=inside,
            over_point=point + normalv * EPSILON,
        )


def _sort_key(intersection: Intersection):
    return intersection.t


class Intersections:
    """A list of :class:`.Intersection` objects, always sorted by increasing `t`

    The class caches the «hit», i.e., the intersection with the lowest non-negative `t`, which
    is the one visible from the origin of the ray. Sorting is stable, so intersections with the
    same `t` keep the order in which they were added, and the hit is the first of them."""

    def __init__(self, intersections: Union[Iterable[Intersection], None] = None):
        self.intersections = sorted(intersections or [], key=_sort_key)
        self._hit = None
        for cur_intersection in self.intersections:
            if cur_intersection.t >= 0.0:
                self._hit = cur_intersection
                break

    def __len__(self):
        return len(self.intersections)

    def __getitem__(self, item):
        return self.intersections[item]

    def __iter__(self):
        return iter(self.intersections)

    def hit(self) -> Union[Intersection, None]:
        """Return the intersection nearest to the origin of the ray, or ``None`` if there is none"""
        return self._hit

    def extend(self, other: "Intersections"):
        """Merge the intersections in `other` into this list"""
        self.intersections.extend(other.intersections)
        self.intersections.sort(key=_sort_key)

        other_hit = other.hit()
        if other_hit is not None and (self._hit is None or other_hit.t < self._hit.t):
            self._hit = other_hit
