"""Bundled YAML data and JSON schemas."""
