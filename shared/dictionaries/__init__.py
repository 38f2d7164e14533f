"""Bundled YAML dictionaries (exercise catalog)."""
