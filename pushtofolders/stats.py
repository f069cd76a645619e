"""
Statistics tracking for a pushtofolders run.
"""

from typing import Dict


class MoveStats:
    """Counts what happened to each file handed to the mover."""

    def __init__(self):
        self._stats = {
            'moved': 0,
            'skipped': 0,
            'failed': 0,
        }

    def increment_moved(self) -> None:
        """Increment moved count when a file lands in its folder."""
        self._stats['moved'] += 1

    def increment_skipped(self) -> None:
        """Increment skipped count when a non-image file is passed over."""
        self._stats['skipped'] += 1

    def increment_failed(self) -> None:
        """Increment failed count when a move is refused or errors out."""
        self._stats['failed'] += 1

    def get_stats(self) -> Dict[str, int]:
        """Get a copy of current statistics."""
        return self._stats.copy()

    def has_errors(self) -> bool:
        return self._stats['failed'] > 0

    def summary(self) -> str:
        return (f"Moved {self._stats['moved']} file(s), skipped {self._stats['skipped']}, "
                f"failed {self._stats['failed']}")

    # Individual stat getters for reporting
    def get_moved(self) -> int:
        return self._stats['moved']

    def get_skipped(self) -> int:
        return self._stats['skipped']

    def get_failed(self) -> int:
        return self._stats['failed']
