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

from math import floor, sqrt

from phongtracer.colors import Color
from phongtracer.geometry import Tuple
from phongtracer.transformations import Transformation


class Pattern:
    """A procedural pattern

    This abstract class represents a function that associates a color with each point in
    «pattern space», a coordinate frame nested inside the object space of the shape that
    uses the pattern. Derived classes must redefine :meth:`.Pattern.pattern_at`; call
    :meth:`.Pattern.pattern_at_shape` to sample the pattern at a point in world space."""

    def __init__(self, transformation: Transformation = Transformation()):
        self.transformation = transformation

    def pattern_at(self, pattern_point: Tuple) -> Color:
        """Return the color of the pattern at a point in pattern space"""
        raise NotImplementedError("Method Pattern.pattern_at is abstract and cannot be called")

    def pattern_at_shape(self, shape, world_point: Tuple) -> Color:
        """Return the color of the pattern at a point in world space

        The point is first converted into the object space of `shape`, and then into
        the space of the pattern."""
        object_point = shape.transformation.invm * world_point
        pattern_point = self.transformation.invm * object_point
        return self.pattern_at(pattern_point)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented

        return vars(self) == vars(other)


class StripePattern(Pattern):
    """A pattern alternating two colors along the x axis

    Each stripe is one unit wide: points with an even integer part of x get `color_a`,
    the others get `color_b`."""

    def __init__(self, color_a: Color, color_b: Color, transformation: Transformation = Transformation()):
        super().__init__(transformation)
        self.color_a = color_a
        self.color_b = color_b

    def pattern_at(self, pattern_point: Tuple) -> Color:
        # floor() rounds towards −∞, so stripes keep alternating for negative x
        return self.color_a if floor(pattern_point.x) % 2 == 0 else self.color_b


class GradientPattern(Pattern):
    """A linear blend from `color_a` to `color_b` repeating every unit along x"""

    def __init__(self, color_a: Color, color_b: Color, transformation: Transformation = Transformation()):
        super().__init__(transformation)
        self.color_a = color_a
        self.color_b = color_b

    def pattern_at(self, pattern_point: Tuple) -> Color:
        fraction = pattern_point.x - floor(pattern_point.x)
        return self.color_a + (self.color_b - self.color_a) * fraction


class RingPattern(Pattern):
    """Concentric rings around the y axis, alternating two colors"""

    def __init__(self, color_a: Color, color_b: Color, transformation: Transformation = Transformation()):
        super().__init__(transformation)
        self.color_a = color_a
        self.color_b = color_b

    def pattern_at(self, pattern_point: Tuple) -> Color:
        distance = sqrt(pattern_point.x ** 2 + pattern_point.z ** 2)
        return self.color_a if floor(distance) % 2 == 0 else self.color_b


class CheckersPattern(Pattern):
    """A 3D checkerboard made of unit cubes alternating two colors"""

    def __init__(self, color_a: Color, color_b: Color, transformation: Transformation = Transformation()):
        super().__init__(transformation)
        self.color_a = color_a
        self.color_b = color_b

    def pattern_at(self, pattern_point: Tuple) -> Color:
        int_x = floor(pattern_point.x)
        int_y = floor(pattern_point.y)
        int_z = floor(pattern_point.z)

        return self.color_a if (int_x + int_y + int_z) % 2 == 0 else self.color_b
