"""Serialize matrices and write them to styling targets."""

from collections.abc import MutableMapping
from math import isinf, isnan

from .logger import LOGGER


def serialize_number(value):
    """Serialize a number as it is written in CSS by browsers.

    Integral values have no decimal part and negative zero is ``0``.

    """
    if isnan(value):
        return 'NaN'
    if isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == int(value) and abs(value) < 1e21:
        return str(int(value))
    string = repr(float(value))
    if 'e' in string:
        mantissa, exponent = string.split('e')
        exponent = int(exponent)
        if -7 < exponent < 0:
            # Exponent notation is only used below 1e-6
            sign = '-' if mantissa.startswith('-') else ''
            digits = mantissa.lstrip('-').replace('.', '')
            string = f'{sign}0.{"0" * (-exponent - 1)}{digits}'
        else:
            string = f'{mantissa}e{exponent:+d}'
    return string


def serialize_matrix(matrix):
    """Get the ``matrix(a, b, c, d, tx, ty)`` descriptor of ``matrix``."""
    return f'matrix({", ".join(map(serialize_number, matrix.values))})'


def set_transform_style(target, value):
    """Set the ``transform`` style of ``target`` to ``value``.

    ``target.style`` is either a mapping of properties, or an object whose
    ``transform`` attribute is set.

    """
    style = target.style
    if isinstance(style, MutableMapping):
        style['transform'] = value
    else:
        style.transform = value
    LOGGER.debug('Transform of %r set to %r', target, value)
