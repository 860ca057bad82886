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

from copy import copy
from math import sqrt
from typing import Union

from phongtracer.geometry import Tuple, ORIGIN, VEC_Y
from phongtracer.intersections import Intersection, Intersections
from phongtracer.materials import Material
from phongtracer.misc import EPSILON
from phongtracer.ray import Ray
from phongtracer.transformations import Transformation


class Shape:
    """A generic 3D shape

    This is an abstract class, and you should only use it to derive
    concrete classes. Be sure to redefine the methods
    :meth:`.Shape.inner_intersect` and :meth:`.Shape.inner_normal_at`, which work in
    object space: the conversion from/to world space is done here, once for all
    the shapes.

    Two shapes compare equal if they have the same type, transformation, and material.
    Use the `index` field, which :class:`.World` assigns when the shape is added, or
    the ``is`` operator to tell apart two instances.
    """

    def __init__(self, transformation: Transformation = Transformation(),
                 material: Union[Material, None] = None):
        """Create a shape, potentially associating a transformation and a material to it

        The material is copied, so that changing it later does not affect other shapes."""
        self.transformation = transformation
        self.material = copy(material) if material is not None else Material()
        self.index = None

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented

        return self.transformation.is_close(other.transformation) and self.material == other.material

    def intersect(self, ray: Ray) -> Intersections:
        """Compute the intersections between a ray (in world space) and this shape"""
        return self.inner_intersect(ray.transform(self.transformation.inverse()))

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Return the normalized vector perpendicular to the surface at `world_point`"""
        object_point = self.transformation.invm * world_point
        object_normal = self.inner_normal_at(object_point)
        return self.transformation.transform_normal(object_normal).normalize()

    def inner_intersect(self, object_ray: Ray) -> Intersections:
        """Compute the intersections between a ray in object space and this shape"""
        raise NotImplementedError(
            "Shape.inner_intersect is an abstract method and cannot be called directly"
        )

    def inner_normal_at(self, object_point: Tuple) -> Tuple:
        """Return the normal to the surface at a point in object space"""
        raise NotImplementedError(
            "Shape.inner_normal_at is an abstract method and cannot be called directly"
        )


class Sphere(Shape):
    """A 3D unit sphere centered on the origin of the axes"""

    def __init__(self, transformation: Transformation = Transformation(),
                 material: Union[Material, None] = None):
        """Create a unit sphere, potentially associating a transformation to it"""
        super().__init__(transformation, material)

    def inner_intersect(self, object_ray: Ray) -> Intersections:
        """Solve |O + tD|² = 1 for t

        Return either no intersections or two of them; the two values are the same if the
        ray is tangent to the sphere."""
        sphere_to_ray = object_ray.origin - ORIGIN
        a = object_ray.direction.dot(object_ray.direction)
        b = 2.0 * object_ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return Intersections()

        sqrt_discriminant = sqrt(discriminant)
        t1 = (-b - sqrt_discriminant) / (2.0 * a)
        t2 = (-b + sqrt_discriminant) / (2.0 * a)
        return Intersections([Intersection(t1, self), Intersection(t2, self)])

    def inner_normal_at(self, object_point: Tuple) -> Tuple:
        return object_point - ORIGIN


class Plane(Shape):
    """The xz plane passing through the origin, with its normal pointing towards +y"""

    def __init__(self, transformation: Transformation = Transformation(),
                 material: Union[Material, None] = None):
        """Create a xz plane, potentially associating a transformation to it"""
        super().__init__(transformation, material)

    def inner_intersect(self, object_ray: Ray) -> Intersections:
        if abs(object_ray.direction.y) < EPSILON:
            # The ray is parallel to the plane, or it lies on it
            return Intersections()

        t = -object_ray.origin.y / object_ray.direction.y
        return Intersections([Intersection(t, self)])

    def inner_normal_at(self, object_point: Tuple) -> Tuple:
        return VEC_Y
