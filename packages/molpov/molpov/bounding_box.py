#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

"""Axis-aligned extents of a molecule."""

# Standard Library
import dataclasses


#============================================
@dataclasses.dataclass(frozen=True)
class BoundingBox:
	min_x: float = 0.0
	max_x: float = 0.0
	min_y: float = 0.0
	max_y: float = 0.0
	min_z: float = 0.0
	max_z: float = 0.0

	@property
	def minimum(self):
		return (self.min_x, self.min_y, self.min_z)

	@property
	def maximum(self):
		return (self.max_x, self.max_y, self.max_z)

	def center(self):
		"""Negated midpoint; translating by it moves the box center to the origin."""
		return (
			-1.0 * (self.min_x + self.max_x) / 2.0,
			-1.0 * (self.min_y + self.max_y) / 2.0,
			-1.0 * (self.min_z + self.max_z) / 2.0,
		)

	def padded(self, radius):
		return BoundingBox(
			self.min_x - radius, self.max_x + radius,
			self.min_y - radius, self.max_y + radius,
			self.min_z - radius, self.max_z + radius,
		)


#============================================
def compute_bounding_box(atoms):
	"""Return the extents of atom positions.

	The box is seeded at the origin, so it always contains (0, 0, 0)
	and an empty atom sequence gives the degenerate origin box.
	"""
	min_x = max_x = 0.0
	min_y = max_y = 0.0
	min_z = max_z = 0.0
	for atom in atoms:
		if atom.x < min_x:
			min_x = atom.x
		if atom.x > max_x:
			max_x = atom.x
		if atom.y < min_y:
			min_y = atom.y
		if atom.y > max_y:
			max_y = atom.y
		if atom.z < min_z:
			min_z = atom.z
		if atom.z > max_z:
			max_z = atom.z
	return BoundingBox(min_x, max_x, min_y, max_y, min_z, max_z)
