"""Playground creation and setup collaborators."""

from goplay.playground.creator import PlaygroundCreator, validate_name
from goplay.playground.setup import PlaygroundSetup, load_template

__all__ = ["PlaygroundCreator", "PlaygroundSetup", "load_template", "validate_name"]
