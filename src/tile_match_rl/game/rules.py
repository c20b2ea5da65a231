from __future__ import annotations

from dataclasses import dataclass

from .constants import BONUS_RUN_LENGTH, MIN_MATCH


@dataclass
class ScoringRules:
    base_match_score: int = 3
    min_match: int = MIN_MATCH
    bonus_run_length: int = BONUS_RUN_LENGTH

    def score_for_clear(self, cells: int) -> int:
        """Points for one cascade pass clearing `cells` distinct positions."""
        if cells < self.min_match:
            return 0
        # 3 for the first triple, 1 for every extra tile
        return self.base_match_score + (cells - self.min_match)

    def score_for_bonus(self, cells: int) -> int:
        return max(0, cells)
