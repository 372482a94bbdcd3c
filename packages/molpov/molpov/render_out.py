#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

# Standard Library
import dataclasses
import io
import os

# local repo modules
from . import pov_options
from . import pov_out
from . import prefix


#============================================
def _build_options(options, overrides):
	base = options or pov_options.PovOptions()
	if not overrides:
		return base
	known = {field.name for field in dataclasses.fields(pov_options.PovOptions)}
	for key in overrides:
		if key not in known:
			raise ValueError(f"Unknown POV-Ray option: {key}")
	return base.replace(**overrides)


#============================================
def _check_extension(filename):
	extension = os.path.splitext(filename)[1].lower().lstrip(".")
	if extension not in ("pov", "inc"):
		raise ValueError(
			"Output format could not be determined; use a .pov or .inc filename."
		)


#============================================
def mol_to_pov(mol, stream, session=None, options=None, now=None, **overrides):
	"""Write one molecule to an open text stream and return its prefix."""
	writer = pov_out.pov_out(_build_options(options, overrides))
	return writer.write_molecule(mol, stream, session=session, now=now)


#============================================
def mols_to_pov(mols, stream, options=None, now=None, **overrides):
	"""Write several molecules to one stream, sharing one header."""
	writer = pov_out.pov_out(_build_options(options, overrides))
	session = prefix.EmissionSession()
	return [writer.write_molecule(mol, stream, session=session, now=now) for mol in mols]


#============================================
def mol_to_text(mol, options=None, now=None, **overrides):
	buffer = io.StringIO()
	mol_to_pov(mol, buffer, options=options, now=now, **overrides)
	return buffer.getvalue()


#============================================
def mols_to_text(mols, options=None, now=None, **overrides):
	buffer = io.StringIO()
	mols_to_pov(mols, buffer, options=options, now=now, **overrides)
	return buffer.getvalue()


#============================================
def mol_to_output(mol, filename, options=None, **overrides):
	"""Render a molecule to a POV-Ray file."""
	return mols_to_output([mol], filename, options=options, **overrides)


#============================================
def mols_to_output(mols, filename, options=None, **overrides):
	_check_extension(filename)
	with open(filename, "w", encoding="utf-8") as handle:
		mols_to_pov(mols, handle, options=options, **overrides)
	return filename
