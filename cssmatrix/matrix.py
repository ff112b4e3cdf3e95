"""Affine transformation matrix.

The matrix holds six values and stands for::

    [ a  c  tx ]
    [ b  d  ty ]
    [ 0  0  1  ]

Points are column vectors, so that ``M @ N`` applies ``N`` first.

"""

from collections import namedtuple
from math import atan2, cos, isinf, nan, pi, sin, sqrt

from .logger import LOGGER
from .style import serialize_matrix, set_transform_style

DEG_TO_RAD = pi / 180

# Decomposition treats skew angles whose ratio is closer to 1 than this as a
# pure rotation.
ROTATION_EPSILON = 1e-5

DecomposedTransform = namedtuple(
    'DecomposedTransform',
    'x y scale_x scale_y rotation skew_x skew_y')


class NonInvertibleMatrix(ValueError):  # noqa: N818
    """Exception raised when inverting a matrix whose determinant is 0."""


def cos_sin(angle):
    """Return the cosine and the sine of ``angle`` in radians.

    Infinite angles give NaN values instead of raising.

    """
    if isinf(angle):
        return nan, nan
    return cos(angle), sin(angle)


class Matrix:
    """2D affine transformation matrix, mutated in place.

    All the transform methods return the matrix itself, so that calls can be
    chained::

        matrix = Matrix().translate(10, 20).rotate(90)

    """
    def __init__(self, a=1, b=0, c=0, d=1, tx=0, ty=0):
        self.set(a, b, c, d, tx, ty)

    def __repr__(self):
        return (
            f'<{type(self).__name__} '
            f'{self.a} {self.b} {self.c} {self.d} {self.tx} {self.ty}>')

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.values == other.values

    def __matmul__(self, other):
        """Return a new matrix, product of ``self`` and ``other``."""
        return self.clone().append_matrix(other)

    @property
    def values(self):
        return self.a, self.b, self.c, self.d, self.tx, self.ty

    @property
    def determinant(self):
        return self.a * self.d - self.b * self.c

    def set(self, a=1, b=0, c=0, d=1, tx=0, ty=0):
        self.a, self.b, self.c, self.d = a, b, c, d
        self.tx, self.ty = tx, ty
        return self

    def identity(self):
        """Reset the matrix to the identity matrix."""
        return self.set()

    def is_identity(self):
        """Return whether the matrix is exactly the identity matrix.

        Values are compared without tolerance: a matrix rotated by 360° is
        generally not the identity matrix.

        """
        return self.values == (1, 0, 0, 1, 0, 0)

    def clone(self):
        return type(self)(*self.values)

    def transform_point(self, x, y):
        return (
            self.a * x + self.c * y + self.tx,
            self.b * x + self.d * y + self.ty)

    def append(self, a, b, c, d, tx, ty):
        """Apply the given matrix before this one, in the local space."""
        _a, _b, _c, _d = self.a, self.b, self.c, self.d
        if (a, b, c, d) != (1, 0, 0, 1):
            self.a, self.b, self.c, self.d = (
                _a * a + _c * b,
                _b * a + _d * b,
                _a * c + _c * d,
                _b * c + _d * d)
        self.tx = _a * tx + _c * ty + self.tx
        self.ty = _b * tx + _d * ty + self.ty
        return self

    def prepend(self, a, b, c, d, tx, ty):
        """Apply this matrix inside the space of the given matrix."""
        _a, _b, _c, _d = self.a, self.b, self.c, self.d
        _tx, _ty = self.tx, self.ty
        self.a, self.b, self.c, self.d = (
            a * _a + c * _b,
            b * _a + d * _b,
            a * _c + c * _d,
            b * _c + d * _d)
        self.tx = a * _tx + c * _ty + tx
        self.ty = b * _tx + d * _ty + ty
        return self

    def append_matrix(self, matrix):
        return self.append(*matrix.values)

    def prepend_matrix(self, matrix):
        return self.prepend(*matrix.values)

    def append_transform(self, x=0, y=0, scale_x=1, scale_y=1, rotation=0,
                         skew_x=0, skew_y=0, reg_x=0, reg_y=0):
        """Append the transform of an object placed in the local space.

        The object is moved to ``(x, y)``, then scaled, rotated and skewed
        around its registration point ``(reg_x, reg_y)``. Angles are given in
        degrees.

        """
        if rotation % 360:
            angle = rotation * DEG_TO_RAD
            cos_r, sin_r = cos_sin(angle)
        else:
            cos_r, sin_r = 1, 0

        if skew_x or skew_y:
            cos_x, sin_x = cos_sin(skew_x * DEG_TO_RAD)
            cos_y, sin_y = cos_sin(skew_y * DEG_TO_RAD)
            self.append(cos_y, sin_y, -sin_x, cos_x, x, y)
            self.append(
                cos_r * scale_x, sin_r * scale_x,
                -sin_r * scale_y, cos_r * scale_y, 0, 0)
        else:
            self.append(
                cos_r * scale_x, sin_r * scale_x,
                -sin_r * scale_y, cos_r * scale_y, x, y)

        if reg_x or reg_y:
            self.tx -= reg_x * self.a + reg_y * self.c
            self.ty -= reg_x * self.b + reg_y * self.d
        return self

    def translate(self, tx, ty):
        self.tx += self.a * tx + self.c * ty
        self.ty += self.b * tx + self.d * ty
        return self

    def scale(self, scale_x, scale_y):
        self.a *= scale_x
        self.b *= scale_x
        self.c *= scale_y
        self.d *= scale_y
        return self

    def rotate(self, angle):
        """Rotate clockwise by ``angle`` degrees."""
        cos_r, sin_r = cos_sin(angle * DEG_TO_RAD)
        a, b, c, d = self.a, self.b, self.c, self.d
        self.a = a * cos_r + c * sin_r
        self.b = b * cos_r + d * sin_r
        self.c = -a * sin_r + c * cos_r
        self.d = -b * sin_r + d * cos_r
        return self

    def skew(self, skew_x, skew_y):
        """Skew horizontally by ``skew_x`` and vertically by ``skew_y``.

        Angles are given in degrees. Skewing by the same angle on both axes
        is a rotation.

        """
        cos_x, sin_x = cos_sin(skew_x * DEG_TO_RAD)
        cos_y, sin_y = cos_sin(skew_y * DEG_TO_RAD)
        return self.append(cos_y, sin_y, -sin_x, cos_x, 0, 0)

    def invert(self):
        a, b, c, d, tx, ty = self.values
        n = self.determinant
        if n == 0:
            raise NonInvertibleMatrix(f'{self!r} has a null determinant')
        self.a, self.b, self.c, self.d = d / n, -b / n, -c / n, a / n
        self.tx = (c * ty - d * tx) / n
        self.ty = -(a * ty - b * tx) / n
        return self

    def decompose(self):
        """Get translation, scale, rotation and skew values of the matrix.

        Angles are returned in degrees. When the two skew angles are equal,
        they are given as a rotation and the skew values are 0.

        """
        a, b, c, d, tx, ty = self.values
        scale_x = sqrt(a * a + b * b)
        scale_y = sqrt(c * c + d * d)
        skew_x = atan2(-c, d)
        skew_y = atan2(b, a)

        # A null skew_y gives an infinite or undefined ratio, that is never
        # considered as a rotation.
        rotation = 0
        if skew_y and abs(1 - skew_x / skew_y) < ROTATION_EPSILON:
            rotation = skew_y / DEG_TO_RAD
            if a < 0 and d >= 0:
                rotation += 180 if rotation <= 0 else -180
            skew_x = skew_y = 0
        else:
            skew_x /= DEG_TO_RAD
            skew_y /= DEG_TO_RAD

        return DecomposedTransform(
            tx, ty, scale_x, scale_y, rotation, skew_x, skew_y)

    def decompose_style(self, target):
        """Decompose the matrix and set it as the transform of ``target``.

        The rotation and scale found by :meth:`decompose` are applied again
        to the matrix before it is written to ``target.style``. Nothing is
        done when ``target`` is ``None``.

        """
        if target is None:
            return
        decomposed = self.decompose()
        LOGGER.debug('Decomposed %r as %r', self, decomposed)
        self.rotate(decomposed.rotation)
        self.scale(decomposed.scale_x, decomposed.scale_y)
        set_transform_style(target, serialize_matrix(self))
        return decomposed
