"""Bundled data files for dux."""
