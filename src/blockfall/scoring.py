"""Line-clear scoring for a single game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoreTracker:
    """Running score and cleared-line total for one game."""

    score: int = 0
    lines: int = 0

    @staticmethod
    def points_for_lines(count: int) -> int:
        """Points for clearing ``count`` rows in one clearing pass."""

        if count <= 0:
            return 0
        return 10 * count + 5 * count * count

    def record_clear(self, count: int) -> int:
        """Add the points for ``count`` cleared rows and return them."""

        points = self.points_for_lines(count)
        if points:
            self.score += points
            self.lines += count
        return points

    def reset(self) -> None:
        self.score = 0
        self.lines = 0
