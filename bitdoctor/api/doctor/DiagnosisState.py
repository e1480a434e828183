"""Lifecycle states of a diagnosis run."""

from enum import Enum


class DiagnosisState(str, Enum):
    NOT_RUN = "not_run"
    RUNNING = "running"
    VALID = "valid"
    INVALID = "invalid"
    ERRORED = "errored"
