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

import math

from phongtracer.colors import Color

# PPM readers are not required to accept lines longer than this
_PPM_MAX_LINE_LENGTH = 70


def clamp_to_byte(component: float) -> int:
    """Convert a color component into an integer in the range 0…255

    Values below 0 and above 1 are clamped."""
    if component < 0.0:
        return 0
    elif component >= 1.0:
        return 255

    return int(math.floor(component * 256))


class Canvas:
    """A 2D image made of floating-point colors

    This class has the following members:

    -   `width` (int): number of columns in the 2D matrix of colors
    -   `height` (int): number of rows in the 2D matrix of colors
    -   `pixels` (list of `Color`): the 2D matrix, represented as a 1D array in row-major order
        (top to bottom, left to right)

    The canvas is the place where :meth:`.Camera.render` stores the colors it computes.
    Colors are kept unbounded; they are clamped only when the image is saved.
    """

    def __init__(self, width=0, height=0):
        """Create a black image with the specified resolution"""
        (self.width, self.height) = (width, height)
        self.pixels = [Color() for i in range(self.width * self.height)]

    def valid_coordinates(self, x, y):
        """Return True if ``(x, y)`` are coordinates within the 2D matrix"""
        return ((x >= 0) and (x < self.width) and
                (y >= 0) and (y < self.height))

    def pixel_offset(self, x, y):
        """Return the position in the 1D array of the specified pixel"""
        return y * self.width + x

    def get_pixel(self, x, y):
        """Return the `Color` value for a pixel in the image

        The pixel at the top-left corner has coordinates (0, 0)."""
        assert self.valid_coordinates(x, y)
        return self.pixels[self.pixel_offset(x, y)]

    def set_pixel(self, x, y, new_color):
        """Set the new color for a pixel in the image

        The pixel at the top-left corner has coordinates (0, 0)."""
        assert self.valid_coordinates(x, y)
        self.pixels[self.pixel_offset(x, y)] = new_color

    def to_rgb_bytes(self) -> bytes:
        """Return the pixels as a sequence of 8-bit RGB triples, in row-major order"""
        result = bytearray()
        for color in self.pixels:
            result.extend((clamp_to_byte(color.r), clamp_to_byte(color.g), clamp_to_byte(color.b)))

        return bytes(result)

    def write_ppm(self, stream):
        """Save the image in a plain-text PPM file (P3)

        The `stream` parameter must be a binary I/O stream."""
        header = f"P3\n{self.width} {self.height}\n255\n"
        stream.write(header.encode("ascii"))

        rgb_bytes = self.to_rgb_bytes()
        row_length = self.width * 3
        for row_start in range(0, len(rgb_bytes), row_length):
            line = ""
            for value in rgb_bytes[row_start:row_start + row_length]:
                token = str(value)
                if line and len(line) + 1 + len(token) > _PPM_MAX_LINE_LENGTH:
                    stream.write((line + "\n").encode("ascii"))
                    line = token
                else:
                    line = f"{line} {token}" if line else token

            stream.write((line + "\n").encode("ascii"))

    def write_png(self, stream):
        """Save the image in a PNG file

        The `stream` parameter must be a binary I/O stream."""
        from PIL import Image
        img = Image.frombytes("RGB", (self.width, self.height), self.to_rgb_bytes())
        img.save(stream, format="PNG")
