#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

"""Pure geometry for placing bond primitives.

Bond primitives are authored with unit length along +X. Aligning one with
a bond takes an X scale, a rotation about Z, a rotation about Y and a
translation to an atom position, in that order. The helpers here compute
those steps and drop any step whose effect is below epsilon.
"""

# Standard Library
import dataclasses
import math


EPSILON = 1e-4


#============================================
@dataclasses.dataclass(frozen=True)
class ScaleOp:
	factor: float


#============================================
@dataclasses.dataclass(frozen=True)
class RotateOp:
	axis: str
	degrees: float


#============================================
@dataclasses.dataclass(frozen=True)
class TranslateOp:
	atom_index: int


#============================================
@dataclasses.dataclass(frozen=True)
class BondGeometry:
	length: float
	horizontal: float
	phi: float
	theta: float
	z_rising: bool


#============================================
@dataclasses.dataclass(frozen=True)
class BondSegment:
	"""One placed primitive; color_atom is the atom whose color it takes."""
	ops: tuple
	color_atom: int | None = None

	@property
	def scale(self):
		for op in self.ops:
			if isinstance(op, ScaleOp):
				return op.factor
		return None


#============================================
def _clamped_acos(value):
	return math.acos(max(-1.0, min(1.0, value)))


#============================================
def solve_bond_geometry(start, end, epsilon=EPSILON):
	"""Compute bond length and orientation angles between two points.

	Args:
		start: (x, y, z) of the begin atom.
		end: (x, y, z) of the end atom.
		epsilon: lengths below this count as zero.

	Returns:
		BondGeometry: length, length of the X-Z projection, phi (angle to
		+Y), theta (angle of the X-Z projection to +X) and whether the
		bond runs toward non-negative Z.
	"""
	x1, y1, z1 = start
	x2, y2, z2 = end
	dx = x2 - x1
	dy = y2 - y1
	dz = z2 - z1
	length = math.sqrt(dx * dx + dy * dy + dz * dz)
	horizontal = math.sqrt(dx * dx + dz * dz)
	phi = 0.0
	theta = 0.0
	if length >= epsilon:
		phi = _clamped_acos(dy / length)
	if horizontal >= epsilon:
		theta = _clamped_acos(dx / horizontal)
	return BondGeometry(length, horizontal, phi, theta, dz >= 0.0)


#============================================
def z_rotation(geometry, reverse=False):
	"""Rotation about Z that tilts +X to the bond's elevation."""
	degrees = math.degrees(-geometry.phi) + 90.0
	if reverse:
		degrees += 180.0
	return degrees


#============================================
def y_rotation(geometry):
	"""Rotation about Y that swings the tilted primitive to the bond's azimuth."""
	degrees = math.degrees(geometry.theta)
	if geometry.z_rising:
		return -1.0 * degrees
	return degrees


#============================================
def _orientation_ops(geometry, factor, reverse, epsilon):
	if geometry.length < epsilon:
		return []
	ops = [ScaleOp(factor)]
	z_degrees = z_rotation(geometry, reverse=reverse)
	if abs(z_degrees) >= epsilon:
		ops.append(RotateOp("z", z_degrees))
	if geometry.theta >= epsilon:
		ops.append(RotateOp("y", y_rotation(geometry)))
	return ops


#============================================
def full_bond_segment(geometry, begin, epsilon=EPSILON):
	"""One full-length primitive from the begin atom to the end atom."""
	ops = _orientation_ops(geometry, geometry.length, False, epsilon)
	ops.append(TranslateOp(begin))
	return BondSegment(tuple(ops))


#============================================
def half_bond_segments(geometry, begin, end, epsilon=EPSILON):
	"""Two half-length primitives meeting at the bond midpoint.

	The first starts at the begin atom, the second at the end atom and
	points back along the bond. Each is colored by the atom it starts at.
	"""
	half = 0.5 * geometry.length
	first = _orientation_ops(geometry, half, False, epsilon)
	first.append(TranslateOp(begin))
	second = _orientation_ops(geometry, half, True, epsilon)
	second.append(TranslateOp(end))
	return (
		BondSegment(tuple(first), color_atom=begin),
		BondSegment(tuple(second), color_atom=end),
	)


#============================================
def _rotate(point, axis, degrees):
	x, y, z = point
	angle = math.radians(degrees)
	cos_a = math.cos(angle)
	sin_a = math.sin(angle)
	if axis == "z":
		return (x * cos_a - y * sin_a, x * sin_a + y * cos_a, z)
	if axis == "y":
		return (x * cos_a + z * sin_a, y, -x * sin_a + z * cos_a)
	if axis == "x":
		return (x, y * cos_a - z * sin_a, y * sin_a + z * cos_a)
	raise ValueError(f"Unknown rotation axis: {axis}")


#============================================
def transform_point(ops, point, positions):
	"""Apply transform ops to a point the way POV-Ray applies them.

	positions maps atom indices to (x, y, z) for TranslateOp targets.
	"""
	x, y, z = point
	for op in ops:
		if isinstance(op, ScaleOp):
			x = x * op.factor
		elif isinstance(op, RotateOp):
			x, y, z = _rotate((x, y, z), op.axis, op.degrees)
		elif isinstance(op, TranslateOp):
			tx, ty, tz = positions[op.atom_index]
			x, y, z = x + tx, y + ty, z + tz
		else:
			raise ValueError(f"Unknown transform op: {op!r}")
	return (x, y, z)
