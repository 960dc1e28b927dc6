# File: timeline_layout/processors/overlap_resolver.py
"""
Interval overlap resolution.

Assigns every event of one lane a slot (overlap index) inside its group of
concurrent events, so that no two overlapping events share a slot. Events
that start at the exact same instant are laid out as equal-width siblings
instead of going through slot assignment.
"""

import heapq
from collections import defaultdict
from datetime import datetime
from typing import Dict, List, Sequence, Set, Tuple

from timeline_layout.utils.logger import setup_logger
from timeline_layout.utils.date_utils import DateLike, is_same_day, is_within_day
from timeline_layout.models import Event, OverlapInfo, OverlapStrategy

logger = setup_logger(__name__)


def _first_free_slot(taken: Set[int]) -> int:
    slot = 0
    while slot in taken:
        slot += 1
    return slot


class OverlapResolver:
    """Computes OverlapInfo for the events of a single lane."""

    def __init__(self, strategy: OverlapStrategy = OverlapStrategy.GREEDY):
        """
        Initialize the resolver.

        Args:
            strategy: GREEDY first-fit against predecessors, or SWEEP with
                cluster-wide column counts
        """
        self.strategy = strategy

    def resolve(self, events: Sequence[Event], day: DateLike) -> Dict[Event, OverlapInfo]:
        """
        Compute overlap metadata for one lane on one day.

        Only events starting on ``day`` and lying inside its day window take
        part; structurally equal events collapse to a single key.

        Args:
            events: The lane's events, in input order
            day: Day being laid out

        Returns:
            Mapping of event to its OverlapInfo
        """
        candidates = [
            event for event in dict.fromkeys(events)
            if is_same_day(event.start_time, day)
            and is_within_day(event.start_time, event.end_time, day)
        ]
        # sorted() is stable, so equal starts keep input order
        ordered = sorted(candidates, key=lambda e: e.start_time)
        siblings = self._same_start_positions(ordered)

        if self.strategy == OverlapStrategy.SWEEP:
            result = self._resolve_sweep(ordered, siblings)
        else:
            result = self._resolve_greedy(ordered, siblings)

        logger.debug(
            f"Resolved {len(result)} events ({self.strategy.value}), "
            f"{sum(1 for info in result.values() if info.is_overlapping)} overlapping"
        )
        return result

    @staticmethod
    def _same_start_positions(ordered: List[Event]) -> Dict[Event, Tuple[int, int]]:
        """Position and size of every event sharing its start with at least one other."""
        groups: Dict[datetime, List[Event]] = defaultdict(list)
        for event in ordered:
            groups[event.start_time].append(event)

        positions: Dict[Event, Tuple[int, int]] = {}
        for members in groups.values():
            if len(members) < 2:
                continue
            for position, event in enumerate(members):
                positions[event] = (position, len(members))
        return positions

    def _resolve_greedy(
        self,
        ordered: List[Event],
        siblings: Dict[Event, Tuple[int, int]]
    ) -> Dict[Event, OverlapInfo]:
        result: Dict[Event, OverlapInfo] = {}
        processed: List[Event] = []

        for event in ordered:
            if event in siblings:
                position, size = siblings[event]
                result[event] = OverlapInfo(True, position, size, same_start=True)
            else:
                taken: Set[int] = set()
                overlap_count = 1
                for other in processed:
                    if event.overlaps_with(other):
                        overlap_count += 1
                        taken.add(result[other].overlap_index)

                result[event] = OverlapInfo(overlap_count > 1, _first_free_slot(taken), overlap_count)

            processed.append(event)

        return result

    def _resolve_sweep(
        self,
        ordered: List[Event],
        siblings: Dict[Event, Tuple[int, int]]
    ) -> Dict[Event, OverlapInfo]:
        """
        Sweep the day keeping a heap of active events keyed by end time.

        Columns freed by finished events are reused. When the active set
        drains, the cluster closes and every member gets the cluster's
        column count as its total.
        """
        result: Dict[Event, OverlapInfo] = {}
        active: List[Tuple[datetime, int, int]] = []
        columns_in_use: Dict[int, int] = defaultdict(int)
        cluster: List[Tuple[Event, int]] = []

        for seq, event in enumerate(ordered):
            while active and active[0][0] <= event.start_time:
                _, column, _ = heapq.heappop(active)
                columns_in_use[column] -= 1

            if not active and cluster:
                self._close_cluster(cluster, siblings, result)
                cluster = []

            if event in siblings:
                column = siblings[event][0]
            else:
                column = _first_free_slot({c for c, n in columns_in_use.items() if n > 0})

            columns_in_use[column] += 1
            heapq.heappush(active, (event.end_time, column, seq))
            cluster.append((event, column))

        if cluster:
            self._close_cluster(cluster, siblings, result)

        return result

    @staticmethod
    def _close_cluster(
        cluster: List[Tuple[Event, int]],
        siblings: Dict[Event, Tuple[int, int]],
        result: Dict[Event, OverlapInfo]
    ) -> None:
        width = max(column for _, column in cluster) + 1
        for event, column in cluster:
            if event in siblings:
                position, size = siblings[event]
                result[event] = OverlapInfo(True, position, size, same_start=True)
            else:
                result[event] = OverlapInfo(len(cluster) > 1, column, width)
