"""Molecule file codecs."""
