"""Command line interface for lensgraph."""
