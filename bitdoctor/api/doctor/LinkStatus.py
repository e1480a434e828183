"""Outcome of resolving one candidate path."""

from enum import Enum


class LinkStatus(str, Enum):
    """Classification of a candidate path after link resolution."""

    NOT_A_LINK = "not_a_link"
    TARGET_EXISTS = "target_exists"
    TARGET_MISSING = "target_missing"
    RESOLUTION_ERROR = "resolution_error"
