#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

"""Declaration name prefixes and the per-stream emission counter."""

# Standard Library
import re
import threading


MISSING_TITLE = "Unknown"
EMPTY_TITLE = "InValid"
_BLANKS = re.compile(r"[ \t\r\n]")


#============================================
def make_prefix(title):
	"""Derive an identifier prefix from a molecule title.

	Keeps the text after the last '/', cuts it at the first '.', and turns
	spaces, tabs and line breaks into underscores. A missing title falls
	back to "Unknown"; a title with nothing left after the last '/' becomes
	"InValid".
	"""
	if title is None:
		title = MISSING_TITLE
	name = title.rsplit("/", 1)[-1]
	if not name:
		return EMPTY_TITLE
	name = name.split(".", 1)[0]
	name = _BLANKS.sub("_", name)
	if not name:
		return EMPTY_TITLE
	return name


#============================================
def indexed_prefix(title, index):
	prefix = make_prefix(title)
	if index > 0:
		prefix += str(index)
	return prefix


#============================================
class EmissionSession:
	"""Counts molecules written to one output stream.

	The first molecule (index 0) gets the stream header and a bare prefix;
	later molecules get their index appended to the prefix.
	"""

	def __init__(self, start=0):
		self._count = start
		self._lock = threading.Lock()

	@property
	def count(self):
		return self._count

	def next_index(self):
		"""Return the current index and advance the counter."""
		with self._lock:
			index = self._count
			self._count += 1
		return index
