"""Tests for the molecule record, element lookup and options."""

# Standard Library
import json
import types

import pytest

# local repo modules
import conftest


conftest.add_molpov_to_sys_path()

# local repo modules
import molpov
from molpov import periodic_table
from molpov import pov_options


#============================================
def test_atoms_are_numbered_from_one():
	mol = molpov.Molecule(title="pair")
	first = mol.add_atom("C", 1, 2, 3)
	second = mol.add_atom("N")
	assert (first.index, second.index) == (1, 2)
	assert first.position == (1.0, 2.0, 3.0)
	assert mol.atom(2) is second
	assert len(mol) == 2
	with pytest.raises(ValueError):
		mol.atom(0)
	with pytest.raises(ValueError):
		mol.atom(3)


#============================================
def test_bond_order_must_be_positive():
	mol = molpov.Molecule()
	with pytest.raises(ValueError):
		mol.add_bond(1, 2, 0)


#============================================
def test_color_label_defaults_to_symbol():
	mol = molpov.Molecule()
	assert mol.add_atom("O").color_label == "O"
	assert mol.add_atom("O", atom_type="O2").color_label == "O2"


#============================================
def test_resolve_molecule_converts_graphs():
	a = types.SimpleNamespace(symbol="H", x=0.0, y=0.0, z=None)
	b = types.SimpleNamespace(symbol="H", x=0.74, y=0.0, z=0.0)
	graph = types.SimpleNamespace(vertices=[a, b], edges=[types.SimpleNamespace(vertices=(b, a), order=1)])
	mol = molpov.resolve_molecule(graph)
	assert mol.title is None
	assert mol.atom(1).z == 0.0
	assert mol.bonds == (molpov.Bond(2, 1, 1),)


#============================================
def test_resolve_molecule_rejects_foreign_edges():
	a = types.SimpleNamespace(symbol="H", x=0.0, y=0.0, z=0.0)
	stray = types.SimpleNamespace(symbol="H", x=1.0, y=0.0, z=0.0)
	graph = types.SimpleNamespace(vertices=[a], edges=[types.SimpleNamespace(vertices=(a, stray), order=1)])
	with pytest.raises(ValueError):
		molpov.resolve_molecule(graph)


#============================================
def test_resolve_symbol():
	assert periodic_table.resolve_symbol("C") == "C"
	assert periodic_table.resolve_symbol("cl") == "Cl"
	assert periodic_table.resolve_symbol("C3") == "C"
	assert periodic_table.resolve_symbol("N.ar") == "N"
	assert periodic_table.resolve_symbol("D") == "H"
	assert periodic_table.resolve_symbol("Car") == "Xx"
	assert periodic_table.resolve_symbol("") == "Xx"
	assert periodic_table.resolve_symbol("fe") == "Fe"


#============================================
def test_style_aliases():
	assert molpov.PovOptions(style="BAS").style == pov_options.FULL_BOND
	assert molpov.PovOptions(style="capped-sticks").style == pov_options.HALF_BOND
	assert molpov.PovOptions(style="spacefill").style == pov_options.SPACE_FILL
	with pytest.raises(ValueError):
		molpov.PovOptions(style="wireframe")


#============================================
def test_option_validation():
	with pytest.raises(ValueError):
		molpov.PovOptions(output_mode="all")
	with pytest.raises(ValueError):
		molpov.PovOptions(epsilon=0.0)
	with pytest.raises(ValueError):
		molpov.PovOptions.from_mapping({"colour": "red"})
	with pytest.raises(ValueError, match="transparent"):
		molpov.PovOptions.from_mapping({"transparent": "false"})
	with pytest.raises(ValueError, match="transparent"):
		molpov.PovOptions.from_mapping({"transparent": 1})
	with pytest.raises(ValueError, match="include_file"):
		molpov.PovOptions.from_mapping({"include_file": 31})
	with pytest.raises(ValueError, match="pov_version"):
		molpov.PovOptions.from_mapping({"pov_version": 3.1})
	with pytest.raises(ValueError, match="epsilon"):
		molpov.PovOptions.from_mapping({"epsilon": "0.001"})
	options = molpov.PovOptions.from_mapping({"style": "cst", "transparent": True})
	assert options.style == pov_options.HALF_BOND
	assert options.transparent is True
	assert molpov.PovOptions(style="space-fill").draws_bonds is False
	assert molpov.PovOptions(style="space-fill", output_mode="guarded").draws_bonds is True


#============================================
def test_load_options_file(tmp_path):
	path = tmp_path / "options.json"
	path.write_text(json.dumps({"style": "half-bond", "include_file": "colors.inc"}), encoding="utf-8")
	options = pov_options.load_options_file(str(path))
	assert options.style == pov_options.HALF_BOND
	assert options.include_file == "colors.inc"
	path.write_text(json.dumps({"transparent": "false"}), encoding="utf-8")
	with pytest.raises(ValueError):
		pov_options.load_options_file(str(path))
	path.write_text("[1, 2]", encoding="utf-8")
	with pytest.raises(ValueError):
		pov_options.load_options_file(str(path))
