"""Core configuration, paths and theming for goplay."""
