#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

"""Element symbol lookup for atom primitives."""

# Standard Library
import logging
import re


logger = logging.getLogger(__name__)

UNKNOWN_SYMBOL = "Xx"

SYMBOLS = (
	"H", "He",
	"Li", "Be", "B", "C", "N", "O", "F", "Ne",
	"Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar",
	"K", "Ca", "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
	"Ga", "Ge", "As", "Se", "Br", "Kr",
	"Rb", "Sr", "Y", "Zr", "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd",
	"In", "Sn", "Sb", "Te", "I", "Xe",
	"Cs", "Ba",
	"La", "Ce", "Pr", "Nd", "Pm", "Sm", "Eu", "Gd", "Tb", "Dy", "Ho", "Er", "Tm", "Yb", "Lu",
	"Hf", "Ta", "W", "Re", "Os", "Ir", "Pt", "Au", "Hg",
	"Tl", "Pb", "Bi", "Po", "At", "Rn",
	"Fr", "Ra",
	"Ac", "Th", "Pa", "U", "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es", "Fm", "Md", "No", "Lr",
	"Rf", "Db", "Sg", "Bh", "Hs", "Mt", "Ds", "Rg", "Cn", "Nh", "Fl", "Mc", "Lv", "Ts", "Og",
)

_KNOWN_SYMBOLS = frozenset(SYMBOLS)
# symbols also accepted with their hydrogen isotope names
_ALIASES = {"D": "H", "T": "H"}
_LEADING_LETTERS = re.compile(r"[A-Za-z]+")


#============================================
def resolve_symbol(label):
	"""Map an element label to a canonical element symbol.

	Case is normalized ("cl" -> "Cl") and a numeric or dotted suffix is
	dropped ("C3" -> "C", "N.ar" -> "N"). Labels that name no element,
	such as the bare type "Car", resolve to "Xx".
	"""
	match = _LEADING_LETTERS.match(label.strip()) if label else None
	if not match:
		logger.warning("No element symbol in atom label %r", label)
		return UNKNOWN_SYMBOL
	candidate = match.group(0).capitalize()
	if candidate in _KNOWN_SYMBOLS:
		return candidate
	if candidate in _ALIASES:
		return _ALIASES[candidate]
	logger.warning("Unknown element in atom label %r", label)
	return UNKNOWN_SYMBOL
