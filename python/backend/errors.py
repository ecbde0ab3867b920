"""Exceptions raised by the tiles game backend."""


class PuzzleSetupError(ValueError):
    """A tile/category set does not form a 4×4 partition."""


class SnapshotError(ValueError):
    """A saved snapshot is malformed or inconsistent."""
