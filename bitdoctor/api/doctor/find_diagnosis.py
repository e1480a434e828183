"""Select a diagnosis by name."""

from collections.abc import Sequence

from .Diagnosis import Diagnosis


def find_diagnosis(name: str, diagnoses: Sequence[Diagnosis]) -> Diagnosis:
    """Return the diagnosis called ``name``.

    Raises:
        ValueError: If no diagnosis has that name
    """
    for diagnosis in diagnoses:
        if diagnosis.name == name:
            return diagnosis
    available = ", ".join(f"'{d.name}'" for d in diagnoses)
    raise ValueError(f"Unknown diagnosis '{name}'. Available: {available}")
