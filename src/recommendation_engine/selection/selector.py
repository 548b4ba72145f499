"""Quota selector: turns a ranked candidate list into today's picks."""

from __future__ import annotations

from recommendation_engine.models.enums import BACKFILL_LABEL, Goal
from recommendation_engine.models.recommendation import ScoredCandidate
from recommendation_engine.selection.strategies import (
    QuotaRule,
    QuotaStrategy,
    strategy_for_goal,
)


class QuotaSelector:
    """Greedy quota-based selection over a globally sorted candidate list.

    Each quota rule scans the list top to bottom, so within a bucket the
    higher-scored exercises win. After all rules run, remaining slots are
    backfilled with the best unpicked candidates of any kind.

    A strategy may be injected; otherwise it is chosen from the goal at
    select() time.
    """

    def __init__(self, strategy: QuotaStrategy | None = None) -> None:
        self.strategy = strategy

    def select(
        self,
        ranked: list[ScoredCandidate],
        goal: Goal,
        count: int,
    ) -> tuple[list[ScoredCandidate], list[tuple[int, str]]]:
        """Pick up to *count* distinct candidates.

        Args:
            ranked: Candidates sorted by score, highest first.
            goal: User goal, used when no strategy was injected.
            count: Maximum number of picks; non-positive gives none.

        Returns:
            The picks in selection order, and (exercise_id, rule label)
            notes for the decision trace.
        """
        picked: list[ScoredCandidate] = []
        notes: list[tuple[int, str]] = []
        if count <= 0:
            return picked, notes

        strategy = self.strategy or strategy_for_goal(goal)
        picked_ids: set[int] = set()

        for rule in strategy.rules():
            if len(picked) >= count:
                break
            self._fill(rule, ranked, count, picked, picked_ids, notes)

        for candidate in ranked:
            if len(picked) >= count:
                break
            if candidate.exercise.id in picked_ids:
                continue
            picked.append(candidate)
            picked_ids.add(candidate.exercise.id)
            notes.append((candidate.exercise.id, BACKFILL_LABEL))

        return picked, notes

    @staticmethod
    def _fill(
        rule: QuotaRule,
        ranked: list[ScoredCandidate],
        count: int,
        picked: list[ScoredCandidate],
        picked_ids: set[int],
        notes: list[tuple[int, str]],
    ) -> None:
        remaining = rule.slots
        for candidate in ranked:
            if len(picked) >= count or remaining <= 0:
                return
            if candidate.exercise.id in picked_ids:
                continue
            if not rule.predicate(candidate.exercise):
                continue
            picked.append(candidate)
            picked_ids.add(candidate.exercise.id)
            notes.append((candidate.exercise.id, rule.label))
            remaining -= 1
