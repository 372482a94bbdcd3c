#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

"""molpov - POV-Ray scene declarations for 3-D molecules."""

# local repo modules
from . import bond_geometry
from . import bounding_box
from . import codec_registry
from . import periodic_table
from . import pov_options
from . import prefix
from . import render_out
from .molecule import Atom
from .molecule import Bond
from .molecule import Molecule
from .molecule import resolve_molecule
from .pov_options import PovOptions
from .pov_out import pov_out
from .prefix import EmissionSession


__version__ = "0.1.0"

__all__ = [
	"Atom",
	"Bond",
	"EmissionSession",
	"Molecule",
	"PovOptions",
	"bond_geometry",
	"bounding_box",
	"codec_registry",
	"periodic_table",
	"pov_options",
	"pov_out",
	"prefix",
	"render_out",
	"resolve_molecule",
]
