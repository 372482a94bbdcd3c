#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

"""Options controlling POV-Ray scene output."""

# Standard Library
import dataclasses
import json


FULL_BOND = "full-bond"
HALF_BOND = "half-bond"
SPACE_FILL = "space-fill"
STYLES = (FULL_BOND, HALF_BOND, SPACE_FILL)

_STYLE_ALIASES = {
	"bas": FULL_BOND,
	"ball-and-stick": FULL_BOND,
	"ball_and_stick": FULL_BOND,
	"full_bond": FULL_BOND,
	"cst": HALF_BOND,
	"capped-sticks": HALF_BOND,
	"capped_sticks": HALF_BOND,
	"half_bond": HALF_BOND,
	"spf": SPACE_FILL,
	"spacefill": SPACE_FILL,
	"space_fill": SPACE_FILL,
}

# selected: only the chosen style is written
# guarded: every style is written inside POV-Ray #if guards
SELECTED = "selected"
GUARDED = "guarded"
OUTPUT_MODES = (SELECTED, GUARDED)


#============================================
def normalize_style(style):
	key = str(style).strip().lower()
	if key in STYLES:
		return key
	if key in _STYLE_ALIASES:
		return _STYLE_ALIASES[key]
	raise ValueError(f"Unknown bond style: {style!r}; use one of {', '.join(STYLES)}")


#============================================
@dataclasses.dataclass(frozen=True)
class PovOptions:
	style: str = FULL_BOND
	transparent: bool = False
	output_mode: str = SELECTED
	include_file: str = "babel31.inc"
	tool_name: str = "molpov"
	pov_version: str = "3.1"
	epsilon: float = 1e-4
	max_radius: float = 3.0

	def __post_init__(self):
		object.__setattr__(self, "style", normalize_style(self.style))
		if self.output_mode not in OUTPUT_MODES:
			raise ValueError(
				f"Unknown output mode: {self.output_mode!r}; use one of {', '.join(OUTPUT_MODES)}"
			)
		if not isinstance(self.transparent, bool):
			raise ValueError(f"transparent must be true or false, got {self.transparent!r}")
		for name in ("include_file", "tool_name", "pov_version"):
			value = getattr(self, name)
			if not isinstance(value, str) or not value:
				raise ValueError(f"{name} must be a non-empty string, got {value!r}")
		for name in ("epsilon", "max_radius"):
			value = getattr(self, name)
			if isinstance(value, bool) or not isinstance(value, (int, float)):
				raise ValueError(f"{name} must be a number, got {value!r}")
		if self.epsilon <= 0:
			raise ValueError("epsilon must be positive")
		if self.max_radius < 0:
			raise ValueError("max_radius must be non-negative")

	@property
	def draws_bonds(self):
		return self.output_mode == GUARDED or self.style != SPACE_FILL

	def replace(self, **changes):
		return dataclasses.replace(self, **changes)

	@classmethod
	def from_mapping(cls, mapping):
		"""Build options from a dict, rejecting unknown keys."""
		known = {field.name for field in dataclasses.fields(cls)}
		for key in mapping:
			if key not in known:
				raise ValueError(f"Unknown POV-Ray option: {key}")
		return cls(**mapping)


#============================================
def load_options_file(path):
	"""Read options from a JSON file holding a single object."""
	with open(path, "r", encoding="utf-8") as handle:
		data = json.load(handle)
	if not isinstance(data, dict):
		raise ValueError(f"Options file {path} must contain a JSON object")
	return PovOptions.from_mapping(data)
