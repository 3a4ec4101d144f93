"""
Set expansion.

Turns a per-exercise prescription (set count, rep scheme, default set type,
rest) into the ordered list of individual sets that gets persisted.
"""

from typing import List

from backend.core.rep_scheme import parse_rep_scheme
from domain.models import MaterializedSet, SetType


def expand_sets(
    set_count: int,
    rep_token: str,
    default_set_type: SetType,
    rest_seconds: int,
) -> List[MaterializedSet]:
    """
    Expand an exercise prescription into individual sets.

    Every set uses the top of the rep range. For a range, the final set
    uses the bottom of the range and is tagged FAILURE. Fixed rep counts
    never get a FAILURE override.

    Args:
        set_count: Number of sets, at least 1
        rep_token: Rep scheme token ("10" or "8-12")
        default_set_type: Type given to every non-overridden set
        rest_seconds: Rest applied to every set

    Returns:
        Sets ordered 1..set_count

    Raises:
        RepSchemeParseError: If rep_token is malformed
        ValueError: If set_count is less than 1
    """
    if set_count < 1:
        raise ValueError(f"set_count must be at least 1, got {set_count}")

    scheme = parse_rep_scheme(rep_token)
    set_type = SetType.normalize(default_set_type)

    sets: List[MaterializedSet] = []
    for order in range(1, set_count + 1):
        reps = scheme.max
        current_type = set_type

        if scheme.is_range and order == set_count:
            current_type = SetType.FAILURE
            reps = scheme.min

        sets.append(
            MaterializedSet(
                set_order=order,
                type=current_type,
                reps=reps,
                rest_seconds=rest_seconds,
            )
        )

    return sets
