"""Command line shell for Mixtape."""
