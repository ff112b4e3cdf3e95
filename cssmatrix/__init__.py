"""2D affine transformation matrices for CSS-like transforms.

The public API is what is accessible from this "root" package without
importing sub-modules.

"""

from .css import parse_transform
from .matrix import (
    DEG_TO_RAD, DecomposedTransform, Matrix, NonInvertibleMatrix)
from .style import serialize_matrix, serialize_number

VERSION = __version__ = '1.0.0'

__all__ = [
    'DEG_TO_RAD', 'VERSION', 'DecomposedTransform', 'Matrix',
    'NonInvertibleMatrix', '__version__', 'parse_transform',
    'serialize_matrix', 'serialize_number']
