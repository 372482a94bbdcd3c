#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

"""POV-Ray scene writer.

Each molecule becomes a block of #declare statements: atom positions,
atom objects, bond objects, unions of atoms and bonds, the molecule object
and a centering vector. Atom and bond primitives (Atom_<Symbol>,
bond_<order>, Color_<type>) and the style flags BAS, CST, SPF and TRANS
come from the include file named in the header.
"""

# Standard Library
import datetime
import logging

# local repo modules
from . import bond_geometry
from . import bounding_box
from . import periodic_table
from . import pov_options
from . import prefix as prefix_module
from .molecule import resolve_molecule


logger = logging.getLogger(__name__)

DATE_FORMAT = "%a %b %d %H:%M:%S %Z %Y"


#============================================
def format_number(value):
	"""Shortest POV-Ray friendly text for a float, six significant digits."""
	text = "%g" % value
	if text == "-0":
		return "0"
	return text


#============================================
def format_vector(values):
	return "<" + ",".join(format_number(value) for value in values) + ">"


#============================================
def _escape_pov_string(text):
	text = " ".join(text.splitlines())
	return text.replace("\\", "\\\\").replace("\"", "\\\"")


#============================================
class pov_out(object):

	def __init__(self, options=None):
		self.options = options or pov_options.PovOptions()

	def write_molecule(self, mol, stream, session=None, now=None):
		"""Append the declarations for one molecule to stream.

		session counts molecules written to the same stream; without one
		the molecule is treated as the first in a fresh stream. The header
		is written only for the first molecule of a session.

		Returns:
			str: the prefix used for every declaration of this molecule.
		"""
		molecule = resolve_molecule(mol)
		if session is None:
			session = prefix_module.EmissionSession()
		index = session.next_index()
		prefix = prefix_module.indexed_prefix(molecule.title, index)
		logger.debug(
			"Writing molecule %s: %d atoms, %d bonds",
			prefix, len(molecule.atoms), len(molecule.bonds),
		)
		if index == 0:
			self._write_header(stream, molecule, now)
		self._write_atoms(stream, molecule, prefix)
		has_bonds = bool(molecule.bonds) and self.options.draws_bonds
		if has_bonds:
			self._write_bonds(stream, molecule, prefix)
		self._write_unions(stream, molecule, prefix, has_bonds)
		box = bounding_box.compute_bounding_box(molecule.atoms)
		if has_bonds:
			self._write_molecule_with_bonds(stream, prefix, box)
		else:
			self._write_molecule_atoms_only(stream, prefix, bool(molecule.bonds))
		self._write_center(stream, prefix, box)
		return prefix

	def _write(self, stream, *lines):
		stream.write("".join(line + "\n" for line in lines))

	def _guarded(self):
		return self.options.output_mode == pov_options.GUARDED

	#--------------------------------------------
	# header
	#--------------------------------------------

	def _write_header(self, stream, molecule, now):
		if now is None:
			now = datetime.datetime.now().astimezone()
		options = self.options
		self._write(
			stream,
			f"//Povray V{options.pov_version} code generated by {options.tool_name}",
			f"//Date: {now.strftime(DATE_FORMAT)}",
			"",
			"//Include header for povray",
			f"#include \"{options.include_file}\"",
			"",
		)
		if not molecule.bonds:
			self._write_no_bonds_warning(stream)
		title = _escape_pov_string(molecule.title or "")
		self._write(
			stream,
			f"//Use PovRay{options.pov_version}",
			f"#version {options.pov_version};",
			"",
			"//Print name of molecule while rendering",
			f"#render \"\\b\\b {title}\\n\\n\"",
			"",
		)

	def _write_no_bonds_warning(self, stream):
		warning = (
			"#warning \"Molecule without bonds!\"",
			"#warning \"You should do a spacefill-model\"",
		)
		if self._guarded():
			self._write(stream, "#if (BAS | CST)", *warning)
			self._write(stream, "#end", "")
		elif self.options.style != pov_options.SPACE_FILL:
			logger.warning("Molecule without bonds drawn as %s", self.options.style)
			self._write(stream, *warning)
			self._write(stream, "")

	#--------------------------------------------
	# atoms
	#--------------------------------------------

	def _write_atoms(self, stream, molecule, prefix):
		count = len(molecule.atoms)
		self._write(stream, f"//Coordinates of atoms 1 - {count}")
		for atom in molecule.atoms:
			self._write(
				stream,
				f"#declare {prefix}_pos_{atom.index} = {format_vector(atom.position)};",
			)
		self._write(stream, "", f"//Povray-description of atoms 1 - {count}")
		for atom in molecule.atoms:
			symbol = periodic_table.resolve_symbol(atom.symbol)
			self._write(
				stream,
				f"#declare {prefix}_atom{atom.index} = object {{",
				f"\t  Atom_{symbol}",
				f"\t  translate {prefix}_pos_{atom.index}",
				"\t }",
			)
		self._write(stream, "")

	#--------------------------------------------
	# bonds
	#--------------------------------------------

	def _write_bonds(self, stream, molecule, prefix):
		self._write(stream, f"//Povray-description of bonds 1 - {len(molecule.bonds)}")
		style = self.options.style
		if self._guarded():
			self._write(stream, "#if (BAS)")
			self._write_full_bonds(stream, molecule, prefix)
			self._write(stream, "#end //(BAS-Bonds)", "", "#if (CST)")
			self._write_half_bonds(stream, molecule, prefix)
			self._write(stream, "#end // (CST-Bonds)", "")
		elif style == pov_options.FULL_BOND:
			self._write_full_bonds(stream, molecule, prefix)
			self._write(stream, "")
		else:
			self._write_half_bonds(stream, molecule, prefix)

	def _bond_geometries(self, molecule):
		epsilon = self.options.epsilon
		for bond_index, bond in enumerate(molecule.bonds):
			start = molecule.atom(bond.begin)
			end = molecule.atom(bond.end)
			geometry = bond_geometry.solve_bond_geometry(start.position, end.position, epsilon)
			if geometry.length < epsilon:
				logger.debug(
					"Bond %d between atoms %d and %d has zero length",
					bond_index, bond.begin, bond.end,
				)
			yield bond_index, bond, geometry

	def _op_line(self, op, prefix):
		if isinstance(op, bond_geometry.ScaleOp):
			return f"scale <{format_number(op.factor)},1.0000,1.0000>"
		if isinstance(op, bond_geometry.RotateOp):
			if op.axis == "z":
				return f"rotate <0.0000,0.0000,{format_number(op.degrees)}>"
			if op.axis == "y":
				return f"rotate <0.0000,{format_number(op.degrees)},0.0000>"
			return f"rotate <{format_number(op.degrees)},0.0000,0.0000>"
		if isinstance(op, bond_geometry.TranslateOp):
			return f"translate {prefix}_pos_{op.atom_index}"
		raise ValueError(f"Unknown transform op: {op!r}")

	def _write_full_bonds(self, stream, molecule, prefix):
		epsilon = self.options.epsilon
		for bond_index, bond, geometry in self._bond_geometries(molecule):
			segment = bond_geometry.full_bond_segment(geometry, bond.begin, epsilon)
			self._write(
				stream,
				f"#declare {prefix}_bond{bond_index} = object {{",
				f"\t  bond_{bond.order}",
			)
			self._write(stream, *(f"\t  {self._op_line(op, prefix)}" for op in segment.ops))
			self._write(stream, "\t }")

	def _write_half_bonds(self, stream, molecule, prefix):
		epsilon = self.options.epsilon
		for bond_index, bond, geometry in self._bond_geometries(molecule):
			segments = bond_geometry.half_bond_segments(geometry, bond.begin, bond.end, epsilon)
			self._write(
				stream,
				f"#declare {prefix}_bond{bond_index} = object {{",
				"\t  union {",
			)
			for segment in segments:
				color = molecule.atom(segment.color_atom).color_label
				self._write(
					stream,
					"\t   object {",
					f"\t    bond_{bond.order}",
					f"\t    pigment{{color Color_{color}}}",
				)
				self._write(stream, *(f"\t    {self._op_line(op, prefix)}" for op in segment.ops))
				self._write(stream, "\t   }")
			self._write(stream, "\t  }", "\t }", "")

	#--------------------------------------------
	# aggregates
	#--------------------------------------------

	def _write_unions(self, stream, molecule, prefix, has_bonds):
		self._write(stream, "", f"//All atoms of molecule {prefix}")
		if self._guarded():
			self._write(
				stream,
				"#ifdef (TRANS)",
				f"#declare {prefix}_atoms = merge {{",
				"#else",
				f"#declare {prefix}_atoms = union {{",
				"#end //(End of TRANS)",
			)
		elif self.options.transparent:
			self._write(stream, f"#declare {prefix}_atoms = merge {{")
		else:
			self._write(stream, f"#declare {prefix}_atoms = union {{")
		self._write(stream, *(f"\t  object{{{prefix}_atom{atom.index}}}" for atom in molecule.atoms))
		self._write(stream, "\t }", "")
		if not has_bonds:
			return
		self._write(stream, "//Bonds only needed for ball and sticks or capped sticks models")
		if self._guarded():
			self._write(stream, "#if (BAS | CST)")
		self._write(stream, f"#declare {prefix}_bonds = union {{")
		self._write(
			stream,
			*(f"\t  object{{{prefix}_bond{index}}}" for index in range(len(molecule.bonds))),
		)
		self._write(stream, "\t }")
		if self._guarded():
			self._write(stream, "#end")
		self._write(stream, "")

	def _write_bounded_by_hint(self, stream, box):
		padded = box.padded(self.options.max_radius)
		self._write(
			stream,
			"//\t  bounded_by {",
			"//\t   box {",
			f"//\t    {format_vector(padded.minimum)}",
			f"//\t    {format_vector(padded.maximum)}",
		)

	def _write_bonds_and_atoms(self, stream, prefix, transparent):
		self._write(stream, f"\t  object{{{prefix}_atoms}}")
		if transparent:
			# keep bond parts hidden inside transparent atoms out of the scene
			self._write(
				stream,
				"\t  difference {",
				f"\t   object{{{prefix}_bonds}}",
				f"\t   object{{{prefix}_atoms}}",
				"\t  }",
			)
		else:
			self._write(stream, f"\t  object{{{prefix}_bonds}}")

	def _write_molecule_with_bonds(self, stream, prefix, box):
		self._write(stream, "", f"//Definition of molecule {prefix}")
		if self._guarded():
			self._write(
				stream,
				"#if (SPF)",
				f"#declare {prefix} = object{{",
				f"\t  {prefix}_atoms",
				"#else",
				f"#declare {prefix} = union {{",
				f"\t  object{{{prefix}_atoms}}",
				"#if (BAS | CST)//(Not really needed at moment!)",
				"#if (TRANS)",
				"\t  difference {",
				f"\t   object{{{prefix}_bonds}}",
				f"\t   object{{{prefix}_atoms}}",
				"\t  }",
				"#else",
				f"\t  object{{{prefix}_bonds}}",
				"#end //(End of TRANS)",
				"#end //(End of (BAS|CST))",
				"#end //(End of SPF)",
			)
		else:
			self._write(stream, f"#declare {prefix} = union {{")
			self._write_bonds_and_atoms(stream, prefix, self.options.transparent)
		self._write_bounded_by_hint(stream, box)
		self._write(stream, "\t }", "")

	def _write_molecule_atoms_only(self, stream, prefix, bonded):
		note = "space-fill" if bonded else "no bonds"
		self._write(
			stream,
			"",
			f"//Definition of Molecule {prefix} ({note})",
			f"#declare {prefix} = object {{{prefix}_atoms}}",
			"",
		)

	def _write_center(self, stream, prefix, box):
		self._write(
			stream,
			f"//Center of molecule {prefix} (bounding box)",
			f"#declare {prefix}_center = {format_vector(box.center())};",
			"",
		)
