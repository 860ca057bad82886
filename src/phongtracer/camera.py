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

import logging
import math
from time import process_time

from phongtracer.canvas import Canvas
from phongtracer.geometry import point, ORIGIN
from phongtracer.ray import Ray
from phongtracer.transformations import Transformation

logger = logging.getLogger(__name__)


class Camera:
    """A pinhole camera implementing a perspective 3D → 2D projection

    The camera sits at the origin of its own reference frame and looks towards −z, with
    the image plane placed at z = −1. Use the `transformation` parameter (typically built
    with :func:`.view_transform`) to place it in the world."""

    def __init__(self, hsize: int, vsize: int, field_of_view: float,
                 transformation: Transformation = Transformation()):
        """Create a new camera

        The parameters `hsize` and `vsize` are the number of columns and rows of the image,
        and `field_of_view` is the angle (in radians) covered by the longest side of the image.

        The `transformation` parameter is an instance of the :class:`.Transformation` class:
        its inverse is the one used to convert rays, and it was computed once when the
        transformation was built."""
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"invalid image size {hsize}×{vsize}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transformation = transformation

        half_view = math.tan(field_of_view / 2.0)
        aspect_ratio = hsize / vsize
        if aspect_ratio >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect_ratio
        else:
            self.half_width = half_view * aspect_ratio
            self.half_height = half_view

        self.pixel_size = self.half_width * 2.0 / hsize
        logger.debug("created a %d×%d camera, pixel size %g", hsize, vsize, self.pixel_size)

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Shoot a ray from the eye through the center of pixel (px, py)

        The pixel (0, 0) is the top-left corner of the image."""
        world_x = self.half_width - (px + 0.5) * self.pixel_size
        world_y = self.half_height - (py + 0.5) * self.pixel_size

        invm = self.transformation.invm
        pixel = invm * point(world_x, world_y, -1.0)
        origin = invm * ORIGIN
        return Ray(origin=origin, direction=(pixel - origin).normalize())

    def render(self, world, callback=None, callback_time_s: float = 2.0) -> Canvas:
        """Compute the color of each pixel in the image and return a :class:`.Canvas`

        Pixels are computed row by row, from top to bottom. If `callback` is not ``None``,
        it is called with the current row and column at most once every `callback_time_s`
        seconds, so that the caller can report the progress of long renderings."""
        image = Canvas(self.hsize, self.vsize)
        logger.info("rendering a %d×%d image", self.hsize, self.vsize)

        start_time = process_time()
        last_call_time = start_time
        for row in range(self.vsize):
            for col in range(self.hsize):
                image.set_pixel(col, row, world.color_at(self.ray_for_pixel(col, row)))

                current_time = process_time()
                if callback and (current_time - last_call_time > callback_time_s):
                    callback(row, col)
                    last_call_time = current_time

        logger.info("rendering completed in %.1f s", process_time() - start_time)
        return image
