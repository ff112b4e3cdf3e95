"""Parse CSS ``transform`` values into matrices.

Supported values are ``none`` and lists of 2D transform functions:
``matrix()``, ``translate()``, ``translateX()``, ``translateY()``,
``scale()``, ``scaleX()``, ``scaleY()``, ``rotate()``, ``skew()``,
``skewX()`` and ``skewY()``.

"""

import math

import tinycss2

from .logger import LOGGER
from .matrix import Matrix, cos_sin

# Radians in one angle unit.
ANGLE_TO_RADIANS = {
    'rad': 1,
    'turn': 2 * math.pi,
    'deg': math.pi / 180,
    'grad': math.pi / 200,
}

# Pixels in one absolute length unit, with 96 pixels per inch.
LENGTHS_TO_PIXELS = {
    'px': 1,
    'pt': 96 / 72,
    'pc': 96 / 6,
    'in': 96,
    'cm': 96 / 2.54,
    'mm': 96 / 25.4,
    'q': 96 / 25.4 / 4,
}


def remove_whitespace(tokens):
    """Drop whitespace and comment tokens."""
    return tuple(
        token for token in tokens
        if token.type not in ('whitespace', 'comment'))


def get_single_keyword(tokens):
    """Return the lowercase name of ``tokens`` if it is one identifier."""
    if len(tokens) == 1 and tokens[0].type == 'ident':
        return tokens[0].lower_value


def parse_function(token):
    """Split the arguments of a function token.

    Arguments are separated by commas or by whitespace. Return the lowercase
    name of the function and its arguments, or ``None`` if ``token`` is not a
    function or if a comma has no argument on one of its sides.

    """
    if token.type != 'function':
        return
    arguments = []
    expect_argument = False
    for argument in remove_whitespace(token.arguments):
        if argument.type == 'literal' and argument.value == ',':
            if expect_argument or not arguments:
                return
            expect_argument = True
        else:
            arguments.append(argument)
            expect_argument = False
    if expect_argument:
        return
    return token.lower_name, arguments


def get_angle(token):
    """Parse an <angle> token in radians."""
    if token.type == 'dimension':
        factor = ANGLE_TO_RADIANS.get(token.lower_unit)
        if factor is not None:
            return token.value * factor
    elif token.type == 'number' and token.value == 0:
        return 0


def get_length(token):
    """Parse an absolute <length> token in pixels."""
    if token.type == 'dimension':
        factor = LENGTHS_TO_PIXELS.get(token.lower_unit)
        if factor is not None:
            return token.value * factor
    elif token.type == 'number' and token.value == 0:
        return 0


def get_number(token):
    if token.type == 'number':
        return token.value


def transform(tokens):
    """Validate the tokens of a ``transform`` value.

    Return a tuple of ``(name, values)`` transforms, with ``name`` in
    ``matrix``, ``translate``, ``scale``, ``rotate`` and ``skew``, lengths
    in pixels and angles in radians. Return ``None`` for invalid values.

    """
    if get_single_keyword(tokens) == 'none':
        return ()
    elif not tokens:
        return

    transforms = []
    for token in tokens:
        function = parse_function(token)
        if not function:
            return
        name, args = function

        if name == 'matrix':
            numbers = tuple(get_number(arg) for arg in args)
            if len(numbers) != 6 or None in numbers:
                return
            transforms.append(('matrix', numbers))
        elif name in ('rotate', 'skewx', 'skewy', 'skew'):
            angles = tuple(get_angle(arg) for arg in args)
            if not angles or None in angles:
                return
            if name == 'rotate' and len(angles) == 1:
                transforms.append(('rotate', angles[0]))
            elif name == 'skewx' and len(angles) == 1:
                transforms.append(('skew', (angles[0], 0)))
            elif name == 'skewy' and len(angles) == 1:
                transforms.append(('skew', (0, angles[0])))
            elif name == 'skew' and len(angles) in (1, 2):
                transforms.append(('skew', (angles + (0,))[:2]))
            else:
                return
        elif name in ('translate', 'translatex', 'translatey'):
            lengths = tuple(get_length(arg) for arg in args)
            if not lengths or None in lengths:
                return
            if name == 'translatex' and len(lengths) == 1:
                transforms.append(('translate', (lengths[0], 0)))
            elif name == 'translatey' and len(lengths) == 1:
                transforms.append(('translate', (0, lengths[0])))
            elif name == 'translate' and len(lengths) in (1, 2):
                transforms.append(('translate', (lengths + (0,))[:2]))
            else:
                return
        elif name in ('scale', 'scalex', 'scaley'):
            numbers = tuple(get_number(arg) for arg in args)
            if not numbers or None in numbers:
                return
            if name == 'scalex' and len(numbers) == 1:
                transforms.append(('scale', (numbers[0], 1)))
            elif name == 'scaley' and len(numbers) == 1:
                transforms.append(('scale', (1, numbers[0])))
            elif name == 'scale' and len(numbers) in (1, 2):
                transforms.append(('scale', (numbers * 2)[:2]))
            else:
                return
        else:
            return
    return tuple(transforms)


def apply_transforms(matrix, transforms):
    """Append validated ``transforms`` to ``matrix``, from left to right."""
    for name, values in transforms:
        if name == 'matrix':
            matrix.append(*values)
        elif name == 'translate':
            matrix.translate(*values)
        elif name == 'scale':
            matrix.scale(*values)
        elif name == 'rotate':
            cos, sin = cos_sin(values)
            matrix.append(cos, sin, -sin, cos, 0, 0)
        elif name == 'skew':
            (cos_x, sin_x), (cos_y, sin_y) = map(cos_sin, values)
            matrix.append(1, sin_y / cos_y, sin_x / cos_x, 1, 0, 0)
    return matrix


def parse_transform(string):
    """Get a matrix corresponding to the CSS transform ``string``.

    Invalid values are logged and ``None`` is returned.

    """
    tokens = remove_whitespace(tinycss2.parse_component_value_list(string))
    transforms = transform(tokens)
    if transforms is None:
        LOGGER.warning('Ignored invalid transform value: %r', string)
        return
    return apply_transforms(Matrix(), transforms)
