"""
Path Splitting Module

Cuts a closed path into contiguous sub-paths that start at given positions.
Because the path is a ring, the part before the first cut and the part
after the last cut belong to the same sub-path; they are joined back
together.
"""

from typing import List, Sequence

from topology.arc_ids import ArcId


def split_path_by_ids(path: Sequence[ArcId], indexes: Sequence[int]) -> List[List[ArcId]]:
    """
    Split a closed path at two or more positions.

    Each index marks the position where a sub-path starts. The indexes may be
    given in any order.

    Args:
        path: Closed path of arc ids
        indexes: Two or more distinct positions in ``path``

    Returns:
        One sub-path per index, in ascending index order. The last sub-path
        continues across the end of ``path`` back to its first cut.

    Example:
        >>> split_path_by_ids(['a', 'b', 'c', 'd', 'e'], [3, 1])
        [['b', 'c'], ['d', 'e', 'a']]
    """
    indexes = sorted(indexes)
    if len(indexes) < 2:
        raise ValueError(f"At least two split positions are required, got {len(indexes)}")

    sub_paths = []
    if indexes[0] > 0:
        sub_paths.append(list(path[:indexes[0]]))
    for start, end in zip(indexes, indexes[1:]):
        sub_paths.append(list(path[start:end]))
    sub_paths.append(list(path[indexes[-1]:]))

    # First sub-ring is split across the endpoint of the path
    if len(sub_paths) > len(indexes):
        head = sub_paths.pop(0)
        sub_paths[-1].extend(head)

    return sub_paths
