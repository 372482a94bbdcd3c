"""Tests for the CML import codec."""

import pytest

# local repo modules
import conftest


conftest.add_molpov_to_sys_path()

# local repo modules
from molpov.codecs import cml


#============================================
def _fixture_text():
	with open(conftest.tests_path("fixtures", "molecules", "water_dimer.cml"), "r") as handle:
		return handle.read()


#============================================
def test_reads_every_molecule():
	mols = cml.text_to_mols(_fixture_text())
	assert len(mols) == 2
	first, second = mols
	assert first.title == "water a"
	assert second.title == "water_b"
	assert [atom.symbol for atom in first.atoms] == ["O", "H", "H"]
	assert first.atom(3).position == pytest.approx((-0.24, 0.9266, 0.0))
	assert [bond.order for bond in first.bonds] == [1, 1]


#============================================
def test_two_dimensional_coordinates_fall_back():
	text = (
		"<cml><molecule><atomArray>"
		"<atom id='a1' elementType='C' x2='1.5' y2='-2.0'/>"
		"</atomArray></molecule></cml>"
	)
	mol = cml.text_to_mol(text, title="flat")
	assert mol.title == "flat"
	assert mol.atom(1).position == (1.5, -2.0, 0.0)


#============================================
def test_invalid_documents_raise():
	with pytest.raises(ValueError):
		cml.text_to_mol("<cml>")
	with pytest.raises(ValueError):
		cml.text_to_mol("<cml></cml>")
	with pytest.raises(ValueError):
		cml.text_to_mol(
			"<cml><molecule><atomArray><atom id='a1' elementType='C'/></atomArray>"
			"<bondArray><bond atomRefs2='a1 a9'/></bondArray></molecule></cml>"
		)
