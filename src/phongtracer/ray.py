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

from __future__ import annotations

from dataclasses import dataclass

from phongtracer.geometry import Tuple
from phongtracer.misc import EPSILON


@dataclass
class Ray:
    """A ray of light propagating in space

    The class contains the following members:

    -   `origin` (``Tuple``): the 3D point where the ray originated
    -   `direction` (``Tuple``): the 3D vector along which this ray propagates

    Passing a vector as the origin or a point as the direction raises ``ValueError``."""

    origin: Tuple
    direction: Tuple

    def __post_init__(self):
        if not self.origin.is_point():
            raise ValueError(f"the origin of a ray must be a point, got {self.origin}")

        if not self.direction.is_vector():
            raise ValueError(f"the direction of a ray must be a vector, got {self.direction}")

    def is_close(self, other: Ray, epsilon=EPSILON):
        """Check if two rays are similar enough to be considered equal"""
        return (self.origin.is_close(other.origin, epsilon=epsilon) and
                self.direction.is_close(other.direction, epsilon=epsilon))

    def position(self, t):
        """Compute the point along the ray's path at some distance from the origin

        Return a point whose distance from the ray's origin is equal to `t`, measured
        in units of the length of `Ray.direction`."""
        return self.origin + self.direction * t

    def transform(self, transformation):
        """Transform a ray

        This method returns a new ray whose origin and direction are the transformation of the original ray.
        The `transformation` can be either a :class:`.Transformation` or a 4×4 :class:`.Matrix`."""
        return Ray(origin=transformation * self.origin,
                   direction=transformation * self.direction)
