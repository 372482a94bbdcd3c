#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

"""ChemDraw connection-table codec.

Layout: a title line, an "atoms bonds" count line, one "x y z symbol" line
per atom and one "begin end order order" line per bond.
"""

# Standard Library
import io

# local repo modules
from ..molecule import Molecule
from ..molecule import resolve_molecule


#============================================
def _parse_counts(line):
	parts = line.split()
	if len(parts) < 2:
		raise ValueError("CT import failed on line 2: expected atom and bond counts")
	try:
		return int(parts[0]), int(parts[1])
	except ValueError as exc:
		raise ValueError(f"CT import failed on line 2: invalid counts {line!r}") from exc


#============================================
def _parse_atom(mol, line, line_number):
	parts = line.split()
	if len(parts) != 4:
		raise ValueError(f"CT import failed on line {line_number}: expected 'x y z symbol'")
	try:
		x, y, z = (float(value) for value in parts[:3])
	except ValueError as exc:
		raise ValueError(f"CT import failed on line {line_number}: invalid coordinates") from exc
	mol.add_atom(parts[3], x, y, z)


#============================================
def _parse_bond(mol, line, line_number):
	parts = line.split()
	if len(parts) not in (3, 4):
		raise ValueError(f"CT import failed on line {line_number}: expected 'begin end order'")
	try:
		begin, end, order = (int(value) for value in parts[:3])
	except ValueError as exc:
		raise ValueError(f"CT import failed on line {line_number}: invalid bond fields") from exc
	mol.add_bond(begin, end, order)


#============================================
def text_to_mol(text, title=None, **kwargs):
	"""Parse one molecule; title is used when the title line is blank."""
	del kwargs
	lines = text.splitlines()
	if len(lines) < 2:
		raise ValueError("CT import failed: missing title or count line")
	mol = Molecule(title=lines[0].strip() or title)
	atom_count, bond_count = _parse_counts(lines[1])
	expected = 2 + atom_count + bond_count
	if len(lines) < expected:
		raise ValueError(
			f"CT import failed: expected {atom_count} atoms and {bond_count} bonds, "
			f"file has {len(lines)} lines"
		)
	for offset in range(atom_count):
		line_number = 3 + offset
		_parse_atom(mol, lines[line_number - 1], line_number)
	for offset in range(bond_count):
		line_number = 3 + atom_count + offset
		_parse_bond(mol, lines[line_number - 1], line_number)
	return mol.validate()


#============================================
def file_to_mol(file_obj, **kwargs):
	text = file_obj.read()
	if isinstance(text, bytes):
		text = text.decode("utf-8")
	return text_to_mol(text, **kwargs)


#============================================
def mol_to_text(mol, **kwargs):
	del kwargs
	molecule = resolve_molecule(mol)
	lines = [molecule.title or "", " %d %d" % (len(molecule.atoms), len(molecule.bonds))]
	for atom in molecule.atoms:
		lines.append(" %9.4f %9.4f %9.4f %-1s" % (atom.x, atom.y, atom.z, atom.symbol))
	for bond in molecule.bonds:
		lines.append("%3d%3d%3d%3d" % (bond.begin, bond.end, bond.order, bond.order))
	return "\n".join(lines) + "\n"


#============================================
def mol_to_file(mol, file_obj, **kwargs):
	text = mol_to_text(mol, **kwargs)
	if isinstance(file_obj, io.TextIOBase):
		file_obj.write(text)
	else:
		file_obj.write(text.encode("utf-8"))
