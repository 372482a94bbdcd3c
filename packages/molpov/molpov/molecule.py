#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

"""Molecule record consumed by the scene writers."""

# Standard Library
import dataclasses


#============================================
@dataclasses.dataclass(frozen=True)
class Atom:
	index: int
	x: float
	y: float
	z: float
	symbol: str
	atom_type: str | None = None

	@property
	def position(self):
		return (self.x, self.y, self.z)

	@property
	def color_label(self):
		return self.atom_type or self.symbol


#============================================
@dataclasses.dataclass(frozen=True)
class Bond:
	begin: int
	end: int
	order: int = 1


#============================================
class Molecule:
	"""Ordered atoms and bonds with an optional title.

	Atoms are numbered from 1 in insertion order and keep that index for
	the lifetime of the molecule. Bonds refer to atoms by index.
	"""

	def __init__(self, title=None):
		self.title = title
		self._atoms = []
		self._bonds = []

	@property
	def atoms(self):
		return tuple(self._atoms)

	@property
	def bonds(self):
		return tuple(self._bonds)

	def add_atom(self, symbol, x=0.0, y=0.0, z=0.0, atom_type=None):
		"""Append an atom and return it with its assigned 1-based index."""
		atom = Atom(len(self._atoms) + 1, float(x), float(y), float(z), symbol, atom_type)
		self._atoms.append(atom)
		return atom

	def add_bond(self, begin, end, order=1):
		if order < 1:
			raise ValueError(f"Bond order must be a positive integer, got {order}")
		bond = Bond(int(begin), int(end), int(order))
		self._bonds.append(bond)
		return bond

	def atom(self, index):
		if index < 1 or index > len(self._atoms):
			raise ValueError(
				f"Atom index {index} out of range; molecule has {len(self._atoms)} atoms"
			)
		return self._atoms[index - 1]

	def validate(self):
		"""Check that every bond references existing atoms."""
		for bond_index, bond in enumerate(self._bonds):
			for atom_index in (bond.begin, bond.end):
				if atom_index < 1 or atom_index > len(self._atoms):
					raise ValueError(
						f"Bond {bond_index} references atom {atom_index}; "
						f"molecule has {len(self._atoms)} atoms"
					)
		return self

	def __len__(self):
		return len(self._atoms)

	def __repr__(self):
		return f"<Molecule {self.title!r}: {len(self._atoms)} atoms, {len(self._bonds)} bonds>"


#============================================
def _graph_to_molecule(graph):
	title = getattr(graph, "title", None) or getattr(graph, "name", None)
	mol = Molecule(title=title)
	index_map = {}
	for vertex in graph.vertices:
		atom = mol.add_atom(
			vertex.symbol,
			getattr(vertex, "x", 0.0),
			getattr(vertex, "y", 0.0),
			getattr(vertex, "z", 0.0) or 0.0,
		)
		index_map[id(vertex)] = atom.index
	for edge in graph.edges:
		vertex_1, vertex_2 = edge.vertices
		try:
			begin = index_map[id(vertex_1)]
			end = index_map[id(vertex_2)]
		except KeyError as exc:
			raise ValueError("Graph edge references a vertex outside the graph") from exc
		mol.add_bond(begin, end, getattr(edge, "order", 1) or 1)
	return mol


#============================================
def resolve_molecule(record):
	"""Return a validated Molecule for any supported input record.

	Supported records are Molecule instances and graph-shaped objects that
	expose vertices (with x, y, z and symbol) and edges (with a vertices
	pair and an order).
	"""
	if isinstance(record, Molecule):
		return record.validate()
	if hasattr(record, "vertices") and hasattr(record, "edges"):
		return _graph_to_molecule(record).validate()
	raise TypeError(f"Unsupported molecule record: {type(record).__name__}")
