"""Bundled data files for goplay."""
