#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

"""POV-Ray export codec (write only)."""

# Standard Library
import io

# local repo modules
from .. import render_out


#============================================
def mol_to_text(mol, **kwargs):
	return render_out.mol_to_text(mol, **kwargs)


#============================================
def mols_to_text(mols, **kwargs):
	return render_out.mols_to_text(mols, **kwargs)


#============================================
def mol_to_file(mol, file_obj, **kwargs):
	mols_to_file([mol], file_obj, **kwargs)


#============================================
def mols_to_file(mols, file_obj, **kwargs):
	if isinstance(file_obj, io.TextIOBase):
		render_out.mols_to_pov(mols, file_obj, **kwargs)
	else:
		file_obj.write(render_out.mols_to_text(mols, **kwargs).encode("utf-8"))
