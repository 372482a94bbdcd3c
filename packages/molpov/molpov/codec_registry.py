#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

"""Registry of molecule codecs looked up by name, alias or extension."""

# Standard Library
import io

# local repo modules
from .codecs import cml
from .codecs import ct
from .codecs import povray


#============================================
class Codec(object):

	def __init__(self, name, module, aliases=(), extensions=()):
		self.name = name
		self.module = module
		self.aliases = tuple(aliases)
		self.extensions = tuple(ext.lower() for ext in extensions)

	@property
	def reads_text(self):
		return hasattr(self.module, "text_to_mol")

	@property
	def writes_text(self):
		return hasattr(self.module, "mol_to_text")

	@property
	def reads_files(self):
		return hasattr(self.module, "file_to_mol")

	@property
	def writes_files(self):
		return hasattr(self.module, "mol_to_file")

	def read_text(self, text, **kwargs):
		if not self.reads_text:
			raise ValueError(f"Codec '{self.name}' does not support reading")
		return self.module.text_to_mol(text, **kwargs)

	def read_all_text(self, text, **kwargs):
		"""Read every molecule in text; single-molecule codecs give one."""
		if hasattr(self.module, "text_to_mols"):
			return list(self.module.text_to_mols(text, **kwargs))
		return [self.read_text(text, **kwargs)]

	def read_file(self, file_obj, **kwargs):
		if not self.reads_files:
			raise ValueError(f"Codec '{self.name}' does not support reading files")
		return self.module.file_to_mol(file_obj, **kwargs)

	def write_text(self, mol, **kwargs):
		if not self.writes_text:
			raise ValueError(f"Codec '{self.name}' does not support writing")
		return self.module.mol_to_text(mol, **kwargs)

	def write_file(self, mol, file_obj, **kwargs):
		if not self.writes_files:
			raise ValueError(f"Codec '{self.name}' does not support writing files")
		return self.module.mol_to_file(mol, file_obj, **kwargs)

	def write_all_text(self, mols, **kwargs):
		if hasattr(self.module, "mols_to_text"):
			return self.module.mols_to_text(mols, **kwargs)
		if len(mols) != 1:
			raise ValueError(f"Codec '{self.name}' writes only one molecule")
		return self.write_text(mols[0], **kwargs)

	def write_all_file(self, mols, file_obj, **kwargs):
		if hasattr(self.module, "mols_to_file"):
			return self.module.mols_to_file(mols, file_obj, **kwargs)
		text = self.write_all_text(mols, **kwargs)
		if isinstance(file_obj, io.TextIOBase):
			return file_obj.write(text)
		return file_obj.write(text.encode("utf-8"))

	def __repr__(self):
		return f"<Codec {self.name}>"


_registry = {}
_aliases = {}
_extensions = {}


#============================================
def register_codec(codec):
	_registry[codec.name] = codec
	for alias in codec.aliases:
		_aliases[alias] = codec.name
	for extension in codec.extensions:
		_extensions[extension] = codec.name
	return codec


#============================================
def reset_registry():
	_registry.clear()
	_aliases.clear()
	_extensions.clear()
	register_codec(Codec("ct", ct, aliases=("chemdraw",), extensions=(".ct",)))
	register_codec(Codec("cml", cml, extensions=(".cml", ".xml")))
	register_codec(Codec("povray", povray, aliases=("pov", "POVRAY"), extensions=(".pov",)))


#============================================
def list_codecs():
	return sorted(_registry)


#============================================
def get_codec(name):
	key = _aliases.get(name, name)
	if key not in _registry:
		raise ValueError(f"Unknown codec: {name}")
	return _registry[key]


#============================================
def get_codec_by_extension(extension):
	key = extension.lower()
	if not key.startswith("."):
		key = "." + key
	if key not in _extensions:
		raise ValueError(f"No codec registered for extension: {extension}")
	return _registry[_extensions[key]]


reset_registry()
