#--------------------------------------------------------------------------
#     This file is part of molpov - a POV-Ray scene generator for molecules
#--------------------------------------------------------------------------

"""Logging setup for the molpov command line."""

# Standard Library
import logging
import sys


#============================================
def setup_logging(level=logging.INFO, log_file=None):
	"""Configure the 'molpov' logger with a stderr handler and an optional file.

	Scene text may go to stdout, so console logs use stderr.
	"""
	logger = logging.getLogger("molpov")
	logger.setLevel(level)
	if logger.hasHandlers():
		logger.handlers.clear()
	formatter = logging.Formatter(
		"%(asctime)s - %(name)s - %(levelname)s - %(message)s",
		datefmt="%H:%M:%S",
	)
	console_handler = logging.StreamHandler(sys.stderr)
	console_handler.setLevel(level)
	console_handler.setFormatter(formatter)
	logger.addHandler(console_handler)
	if log_file:
		file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
		file_handler.setLevel(level)
		file_handler.setFormatter(formatter)
		logger.addHandler(file_handler)
	return logger
