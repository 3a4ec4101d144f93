"""
Set type enumeration for exercise sets.

The values match the `type` column of the exercise_sets table and the
vocabulary the program generator is prompted with.
"""

import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class SetType(str, Enum):
    """Semantics of an individual set."""

    REGULAR = "regular"
    WARM_UP = "warm_up"
    DROP_SET = "drop_set"
    FAILURE = "failure"
    BACKDOWN = "backdown"
    TEMPO = "tempo"
    SUPERSET = "superset"
    CONTRAST = "contrast"
    COMPLEX = "complex"
    CLUSTER = "cluster"
    PYRAMID = "pyramid"
    PARTIAL = "partial"
    BURNS = "burns"
    PAUSE = "pause"
    PULSE = "pulse"
    NEGATIVE = "negative"
    FORCED_REP = "forced_rep"
    PRE_EXHAUST = "pre_exhaust"
    POST_EXHAUST = "post_exhaust"

    @classmethod
    def normalize(cls, value: Any) -> "SetType":
        """
        Coerce a generator-supplied set type into a SetType.

        Accepts enum members, canonical values and loose spellings such as
        "Drop Set", "Super Set" or "warm-up". Unknown or empty values fall
        back to REGULAR.

        Args:
            value: Raw set type value

        Returns:
            Matching SetType, REGULAR if unrecognized
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.REGULAR

        key = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        key = _SET_TYPE_ALIASES.get(key, key)
        if not key:
            return cls.REGULAR

        try:
            return cls(key)
        except ValueError:
            logger.warning(f"Unknown set type '{value}', defaulting to regular")
            return cls.REGULAR


_SET_TYPE_ALIASES = {
    "super_set": "superset",
    "warmup": "warm_up",
    "dropset": "drop_set",
    "back_down": "backdown",
    "forced_reps": "forced_rep",
    "to_failure": "failure",
}
