"""Command-line interface for labstats."""
