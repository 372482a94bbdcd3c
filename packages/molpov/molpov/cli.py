#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

"""Command line: convert a molecule file into a POV-Ray scene."""

# Standard Library
import argparse
import logging
import os
import sys

# local repo modules
from . import codec_registry
from . import logging_config
from . import pov_options
from . import render_out


logger = logging.getLogger(__name__)


#============================================
def parse_args(argv=None):
	"""Parse command-line arguments."""
	parser = argparse.ArgumentParser(
		prog="molpov",
		description="Write POV-Ray scene declarations for 3-D molecules.",
	)
	parser.add_argument("input_path", help="Molecule file (.ct, .cml).")
	parser.add_argument(
		"-o",
		"--output",
		dest="output_path",
		default=None,
		help="Path of the .pov file to write (defaults to stdout).",
	)
	parser.add_argument(
		"-f",
		"--input-format",
		dest="input_format",
		default=None,
		help="Input codec name (defaults to the input file extension).",
	)
	parser.add_argument(
		"-s",
		"--style",
		dest="style",
		default=None,
		help="Bond style: full-bond, half-bond or space-fill.",
	)
	parser.add_argument(
		"-t",
		"--transparent",
		dest="transparent",
		action="store_true",
		default=None,
		help="Cut bonds out of the atoms for transparent rendering.",
	)
	parser.add_argument(
		"-g",
		"--guarded",
		dest="guarded",
		action="store_true",
		help="Write every style inside POV-Ray #if guards (legacy output).",
	)
	parser.add_argument(
		"-i",
		"--include",
		dest="include_file",
		default=None,
		help="Include file with the atom and bond primitives.",
	)
	parser.add_argument(
		"--options",
		dest="options_path",
		default=None,
		help="JSON file with POV-Ray options; flags override its values.",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Enable debug logging.",
	)
	return parser.parse_args(argv)


#============================================
def build_options(args):
	if args.options_path:
		options = pov_options.load_options_file(args.options_path)
	else:
		options = pov_options.PovOptions()
	changes = {}
	if args.style is not None:
		changes["style"] = args.style
	if args.transparent is not None:
		changes["transparent"] = args.transparent
	if args.guarded:
		changes["output_mode"] = pov_options.GUARDED
	if args.include_file is not None:
		changes["include_file"] = args.include_file
	if changes:
		options = options.replace(**changes)
	return options


#============================================
def read_molecules(input_path, input_format=None):
	if input_format:
		codec = codec_registry.get_codec(input_format)
	else:
		codec = codec_registry.get_codec_by_extension(os.path.splitext(input_path)[1])
	with open(input_path, "r", encoding="utf-8") as handle:
		text = handle.read()
	# the file name stands in for a missing title
	return codec.read_all_text(text, title=input_path)


#============================================
def main(argv=None):
	args = parse_args(argv)
	logging_config.setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
	options = build_options(args)
	mols = read_molecules(args.input_path, args.input_format)
	logger.info("Read %d molecule(s) from %s", len(mols), args.input_path)
	if args.output_path:
		render_out.mols_to_output(mols, args.output_path, options=options)
	else:
		render_out.mols_to_pov(mols, sys.stdout, options=options)
	return 0


if __name__ == "__main__":
	sys.exit(main())
