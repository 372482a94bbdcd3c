#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

"""CML import codec for 3-D coordinates."""

# Third Party
import defusedxml.ElementTree as ET

# local repo modules
from ..molecule import Molecule


_BOND_ORDERS = {
	"1": 1, "S": 1,
	"2": 2, "D": 2,
	"3": 3, "T": 3,
	"A": 1,
}


#============================================
def _local_name(element):
	return element.tag.rsplit("}", 1)[-1]


#============================================
def _children(element, name):
	return [child for child in element if _local_name(child) == name]


#============================================
def _descendants(element, name):
	return [node for node in element.iter() if _local_name(node) == name]


#============================================
def _atom_coords(atom_el):
	if atom_el.get("x3") is not None:
		keys = ("x3", "y3", "z3")
	else:
		keys = ("x2", "y2", None)
	coords = []
	for key in keys:
		value = atom_el.get(key) if key else None
		try:
			coords.append(float(value) if value is not None else 0.0)
		except ValueError as exc:
			raise ValueError(f"CML atom {atom_el.get('id')!r} has invalid {key}: {value!r}") from exc
	return coords


#============================================
def _molecule_title(mol_el):
	for name_el in _children(mol_el, "name"):
		if name_el.text and name_el.text.strip():
			return name_el.text.strip()
	return mol_el.get("title") or mol_el.get("id")


#============================================
def _read_molecule(mol_el, title=None):
	mol = Molecule(title=_molecule_title(mol_el) or title)
	atom_ids = {}
	for array_el in _children(mol_el, "atomArray"):
		for atom_el in _children(array_el, "atom"):
			symbol = atom_el.get("elementType")
			if not symbol:
				raise ValueError(f"CML atom {atom_el.get('id')!r} has no elementType")
			x, y, z = _atom_coords(atom_el)
			atom = mol.add_atom(symbol, x, y, z)
			atom_ids[atom_el.get("id")] = atom.index
	for array_el in _children(mol_el, "bondArray"):
		for bond_el in _children(array_el, "bond"):
			refs = (bond_el.get("atomRefs2") or "").split()
			if len(refs) != 2:
				raise ValueError("CML bond needs exactly two atomRefs2 entries")
			try:
				begin, end = atom_ids[refs[0]], atom_ids[refs[1]]
			except KeyError as exc:
				raise ValueError(f"CML bond references unknown atom {exc.args[0]!r}") from exc
			order_text = (bond_el.get("order") or "1").strip().upper()
			if order_text not in _BOND_ORDERS:
				raise ValueError(f"CML bond has unsupported order {order_text!r}")
			mol.add_bond(begin, end, _BOND_ORDERS[order_text])
	return mol.validate()


#============================================
def text_to_mols(text, title=None, **kwargs):
	del kwargs
	if isinstance(text, bytes):
		text = text.decode("utf-8")
	try:
		root = ET.fromstring(text)
	except ET.ParseError as exc:
		raise ValueError(f"CML import failed: {exc}") from exc
	mols = [_read_molecule(mol_el, title) for mol_el in _descendants(root, "molecule")]
	if not mols:
		raise ValueError("CML import failed: no molecule element found")
	return mols


#============================================
def text_to_mol(text, **kwargs):
	return text_to_mols(text, **kwargs)[0]


#============================================
def file_to_mol(file_obj, **kwargs):
	return text_to_mol(file_obj.read(), **kwargs)
