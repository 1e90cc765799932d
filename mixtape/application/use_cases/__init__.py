"""Use cases for the Mixtape application."""

from .apply_changes import ApplyChangesResult, ChangeEngine, run_apply_changes

__all__ = [
    "ApplyChangesResult",
    "ChangeEngine",
    "run_apply_changes",
]
