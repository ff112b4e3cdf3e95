"""Test matrix decomposition and styling targets."""

import logging
from math import inf, nan, sqrt

import pytest

from cssmatrix import DecomposedTransform, Matrix

from .testing_utils import Target, assert_matrix, assert_no_logs, capture_logs


@assert_no_logs
def test_decompose_identity():
    decomposed = Matrix().decompose()
    assert isinstance(decomposed, DecomposedTransform)
    assert decomposed == (0, 0, 1, 1, 0, 0, 0)


@assert_no_logs
def test_decompose_translation():
    decomposed = Matrix(1, 0, 0, 1, 5, 6).decompose()
    assert (decomposed.x, decomposed.y) == (5, 6)


@assert_no_logs
def test_decompose_scale_rotation():
    matrix = Matrix().append_transform(0, 0, 2, 3, 30, 0, 0, 0, 0)
    decomposed = matrix.decompose()
    assert decomposed.scale_x == pytest.approx(2)
    assert decomposed.scale_y == pytest.approx(3)
    assert decomposed.rotation == pytest.approx(30)
    assert decomposed.skew_x == decomposed.skew_y == 0


@assert_no_logs
@pytest.mark.parametrize('angle', (-150, -90, -45, 10, 45, 90, 135, 180))
def test_decompose_rotation(angle):
    decomposed = Matrix().rotate(angle).decompose()
    assert decomposed.rotation == pytest.approx(angle)
    assert decomposed.scale_x == pytest.approx(1)
    assert decomposed.scale_y == pytest.approx(1)


@assert_no_logs
def test_decompose_rotation_quadrant():
    # Negative a and positive d flip the rotation by half a turn
    decomposed = Matrix(-1e-20, 1, -1, 0).decompose()
    assert decomposed.rotation == pytest.approx(-90)
    assert decomposed.skew_x == decomposed.skew_y == 0


@assert_no_logs
def test_decompose_skew():
    decomposed = Matrix().skew(10, 20).decompose()
    assert decomposed.rotation == 0
    assert decomposed.skew_x == pytest.approx(10)
    assert decomposed.skew_y == pytest.approx(20)
    assert decomposed.scale_x == pytest.approx(1)
    assert decomposed.scale_y == pytest.approx(1)


@assert_no_logs
def test_decompose_null_skew_y():
    # No rotation is found when the vertical skew is 0
    decomposed = Matrix(1, 0, -1, 1).decompose()
    assert decomposed.rotation == 0
    assert decomposed.skew_x == pytest.approx(45)
    assert decomposed.skew_y == 0


@assert_no_logs
def test_decompose_is_pure():
    matrix = Matrix(0.5, 0.25, -0.75, 1.5, -10, 20)
    matrix.decompose()
    assert matrix.values == (0.5, 0.25, -0.75, 1.5, -10, 20)


@assert_no_logs
def test_decompose_style_no_target():
    matrix = Matrix(0.5, 0.25, -0.75, 1.5, -10, 20)
    assert matrix.decompose_style(None) is None
    assert matrix.values == (0.5, 0.25, -0.75, 1.5, -10, 20)


@assert_no_logs
def test_decompose_style():
    target = Target()
    Matrix(1, 0, 0, 1, 5, 6).decompose_style(target)
    assert target.style.transform == 'matrix(1, 0, 0, 1, 5, 6)'


@assert_no_logs
def test_decompose_style_mapping():
    target = Target({'opacity': 1})
    Matrix(2, 0, 0, 2, 5, 6).decompose_style(target)
    assert target.style == {
        'opacity': 1, 'transform': 'matrix(4, 0, 0, 4, 5, 6)'}


@assert_no_logs
def test_decompose_style_applies_rotation_scale():
    matrix = Matrix().append_transform(0, 0, 2, 3, 30, 0, 0, 0, 0)
    expected = matrix.clone().rotate(30).scale(2, 3)
    decomposed = matrix.decompose_style(Target())
    assert decomposed.rotation == pytest.approx(30)
    assert_matrix(matrix, expected.values)


@assert_no_logs
def test_decompose_style_skew():
    # Skew values are not applied again, scale values are
    target = Target()
    matrix = Matrix(1, 0, -1, 1, 0, 0)
    matrix.decompose_style(target)
    assert matrix.values == (1, 0, -sqrt(2), sqrt(2), 0, 0)
    assert target.style.transform == (
        'matrix(1, 0, -1.4142135623730951, 1.4142135623730951, 0, 0)')


def test_decompose_style_logs():
    target = Target()
    with capture_logs(level=logging.DEBUG) as logs:
        Matrix(1, 0, 0, 1, 5, 6).decompose_style(target)
    assert len(logs) == 2
    assert logs[0].startswith('DEBUG: Decomposed <Matrix 1 0 0 1 5 6>')
    assert logs[1].endswith("set to 'matrix(1, 0, 0, 1, 5, 6)'")


@assert_no_logs
@pytest.mark.parametrize('value, transform', (
    (inf, 'matrix(Infinity, NaN, NaN, 1, 5, 6)'),
    (-inf, 'matrix(-Infinity, NaN, NaN, 1, 5, 6)'),
    (nan, 'matrix(NaN, NaN, NaN, 1, 5, 6)'),
))
def test_decompose_style_non_finite(value, transform):
    target = Target()
    decomposed = Matrix(value, 0, 0, 1, 5, 6).decompose_style(target)
    assert decomposed.rotation == 0
    assert target.style.transform == transform
