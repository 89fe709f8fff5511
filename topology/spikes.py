"""
Spike Removal Module

A spike is a traversal of an arc immediately followed by the traversal of
the same arc in the opposite direction: a zero-area back-and-forth that a
ring split can leave behind.
"""

from typing import List

from topology.arc_ids import ArcId
from utils.logger import get_logger

logger = get_logger(__name__)


def remove_spikes_in_path(path: List[ArcId]) -> List[ArcId]:
    """
    Remove spikes from a closed path, in place.

    The last and first entries count as adjacent. Removing one spike can
    bring a new complementary pair together, so removal repeats until no
    two neighbouring entries are complements of each other.

    Args:
        path: Closed path of arc ids (modified in place)

    Returns:
        The same list, for convenience
    """
    removed = 0
    while len(path) >= 2:
        if path[0] == ~path[-1]:
            del path[-1]
            del path[0]
        else:
            for i in range(1, len(path)):
                if path[i - 1] == ~path[i]:
                    del path[i - 1:i + 1]
                    break
            else:
                break
        removed += 1

    if removed:
        logger.debug(f"Removed {removed} spike(s), {len(path)} arc(s) remain")
    return path
