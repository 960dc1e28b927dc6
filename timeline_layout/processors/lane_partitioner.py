# File: timeline_layout/processors/lane_partitioner.py
"""
Lane partitioning module.
Routes events into lanes by their lane key before overlap resolution.
"""

from typing import Dict, List, Sequence

from timeline_layout.core.config_manager import Config
from timeline_layout.utils.logger import setup_logger
from timeline_layout.models import Event, Lane, LaneConfigurationError

logger = setup_logger(__name__)


def validate_lanes(lanes: Sequence[Lane]) -> None:
    """
    Check the lane set against the 0 or MIN_LANES..MAX_LANES rule.

    Raises:
        LaneConfigurationError: On a single lane, too many lanes, or repeated ids
    """
    count = len(lanes)
    if count == 0:
        return

    if count < Config.MIN_LANES or count > Config.MAX_LANES:
        raise LaneConfigurationError(
            f"Lane count must be 0 or between {Config.MIN_LANES} and {Config.MAX_LANES}, got {count}"
        )

    seen = set()
    for lane in lanes:
        if lane.id in seen:
            raise LaneConfigurationError(f"Duplicate lane id: {lane.id}")
        seen.add(lane.id)


def partition_events(events: Sequence[Event], lanes: Sequence[Lane]) -> Dict[str, List[Event]]:
    """
    Split events into lanes by ``lane_key``.

    Every defined lane is present in the result (in definition order), even
    when empty. Events without a matching lane go to the implicit default
    lane, which is appended last and only when it received events. With no
    lanes defined, all events land in the default lane.

    Args:
        events: Events to route, in input order
        lanes: Lane definitions (0 or 2-10 of them)

    Returns:
        Mapping of lane id to its events, each list in input order
    """
    validate_lanes(lanes)
    default_id = Config.DEFAULT_LANE_ID

    if not lanes:
        return {default_id: list(events)}

    partitions: Dict[str, List[Event]] = {lane.id: [] for lane in lanes}
    defined_ids = set(partitions)
    unrouted = 0

    for event in events:
        if event.lane_key in defined_ids:
            partitions[event.lane_key].append(event)
        else:
            # A defined lane may itself be called "default"; unrouted events join it
            partitions.setdefault(default_id, []).append(event)
            unrouted += 1

    if unrouted:
        logger.debug(f"{unrouted} events without a matching lane routed to '{default_id}'")

    return partitions
