"""Command line interface for structschema."""
