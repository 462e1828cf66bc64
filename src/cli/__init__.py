"""Command line interface for the fact board."""
