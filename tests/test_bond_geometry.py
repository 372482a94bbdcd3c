"""Tests for bond primitive placement geometry."""

# Standard Library
import math

import pytest

# local repo modules
import conftest


conftest.add_molpov_to_sys_path()

# local repo modules
from molpov import bond_geometry
from molpov.bond_geometry import RotateOp
from molpov.bond_geometry import ScaleOp
from molpov.bond_geometry import TranslateOp


BOND_CASES = (
	((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)),
	((0.0, 0.0, 0.0), (-1.5, 0.0, 0.0)),
	((0.0, 0.0, 0.0), (0.0, 0.0, 2.0)),
	((0.0, 0.0, 0.0), (0.0, 0.0, -2.0)),
	((0.0, 0.0, 0.0), (0.0, -1.0, 0.0)),
	((1.0, 2.0, 3.0), (2.5, 0.5, 4.0)),
	((1.0, 2.0, 3.0), (-0.5, 3.5, 1.0)),
	((-0.3, 0.7, -1.1), (0.4, -0.2, -2.6)),
	((0.5, 0.5, 0.5), (0.5, 1.5, 0.5)),
)


#============================================
def _positions(start, end):
	return {1: start, 2: end}


#============================================
def _assert_point(actual, expected):
	for got, want in zip(actual, expected):
		assert got == pytest.approx(want, abs=1e-9)


#============================================
def test_zero_length_bond_translates_only():
	geometry = bond_geometry.solve_bond_geometry((1.0, 2.0, 3.0), (1.0, 2.0, 3.0))
	assert geometry.length == 0.0
	assert geometry.phi == 0.0
	assert geometry.theta == 0.0
	segment = bond_geometry.full_bond_segment(geometry, 1)
	assert segment.ops == (TranslateOp(1),)
	first, second = bond_geometry.half_bond_segments(geometry, 1, 2)
	assert first.ops == (TranslateOp(1),)
	assert second.ops == (TranslateOp(2),)


#============================================
def test_bond_along_y_rotates_about_z_only():
	geometry = bond_geometry.solve_bond_geometry((0.0, 0.0, 0.0), (0.0, 2.0, 0.0))
	assert geometry.phi == 0.0
	assert geometry.horizontal == 0.0
	segment = bond_geometry.full_bond_segment(geometry, 1)
	assert segment.ops == (ScaleOp(2.0), RotateOp("z", 90.0), TranslateOp(1))


#============================================
def test_bond_along_x_needs_no_rotation():
	geometry = bond_geometry.solve_bond_geometry((0.0, 0.0, 0.0), (3.0, 0.0, 0.0))
	assert math.degrees(geometry.phi) == pytest.approx(90.0)
	assert geometry.theta == 0.0
	segment = bond_geometry.full_bond_segment(geometry, 1)
	assert [type(op) for op in segment.ops] == [ScaleOp, TranslateOp]
	assert segment.scale == pytest.approx(3.0)


#============================================
def test_y_rotation_sign_follows_z_direction():
	rising = bond_geometry.solve_bond_geometry((0.0, 0.0, 0.0), (0.0, 0.0, 1.0))
	falling = bond_geometry.solve_bond_geometry((0.0, 0.0, 0.0), (0.0, 0.0, -1.0))
	assert rising.z_rising is True
	assert falling.z_rising is False
	assert bond_geometry.y_rotation(rising) == pytest.approx(-90.0)
	assert bond_geometry.y_rotation(falling) == pytest.approx(90.0)


#============================================
@pytest.mark.parametrize("start,end", BOND_CASES)
def test_full_bond_spans_begin_to_end(start, end):
	geometry = bond_geometry.solve_bond_geometry(start, end)
	segment = bond_geometry.full_bond_segment(geometry, 1)
	positions = _positions(start, end)
	_assert_point(bond_geometry.transform_point(segment.ops, (0.0, 0.0, 0.0), positions), start)
	_assert_point(bond_geometry.transform_point(segment.ops, (1.0, 0.0, 0.0), positions), end)


#============================================
@pytest.mark.parametrize("start,end", BOND_CASES)
def test_half_bonds_meet_at_midpoint(start, end):
	geometry = bond_geometry.solve_bond_geometry(start, end)
	first, second = bond_geometry.half_bond_segments(geometry, 1, 2)
	positions = _positions(start, end)
	midpoint = tuple((a + b) / 2.0 for a, b in zip(start, end))
	_assert_point(bond_geometry.transform_point(first.ops, (0.0, 0.0, 0.0), positions), start)
	_assert_point(bond_geometry.transform_point(first.ops, (1.0, 0.0, 0.0), positions), midpoint)
	_assert_point(bond_geometry.transform_point(second.ops, (0.0, 0.0, 0.0), positions), end)
	_assert_point(bond_geometry.transform_point(second.ops, (1.0, 0.0, 0.0), positions), midpoint)


#============================================
def test_half_bond_scales_sum_to_length():
	geometry = bond_geometry.solve_bond_geometry((1.0, 2.0, 3.0), (2.5, 0.5, 4.0))
	first, second = bond_geometry.half_bond_segments(geometry, 1, 2)
	assert first.scale + second.scale == pytest.approx(geometry.length)
	assert first.color_atom == 1
	assert second.color_atom == 2


#============================================
def test_second_half_faces_back():
	geometry = bond_geometry.solve_bond_geometry((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
	first, second = bond_geometry.half_bond_segments(geometry, 1, 2)
	assert [type(op) for op in first.ops] == [ScaleOp, TranslateOp]
	assert second.ops[1] == RotateOp("z", pytest.approx(180.0))


#============================================
def test_acos_argument_is_clamped():
	assert bond_geometry._clamped_acos(1.0000000000000002) == 0.0
	assert bond_geometry._clamped_acos(-1.0000000000000002) == pytest.approx(math.pi)


#============================================
def test_transform_point_rejects_unknown_axis():
	with pytest.raises(ValueError):
		bond_geometry.transform_point((RotateOp("w", 10.0),), (1.0, 0.0, 0.0), {})
