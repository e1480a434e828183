"""Doctor list API command.

CLI: bitdoctor doctor list
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.doctor import DoctorListOutput


def cmd_list() -> StageResult:
    """List registered diagnoses."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from pathlib import Path

        from .get_diagnoses import get_diagnoses

        yield (0.5, "Collecting diagnoses...")
        # Listing never examines, so the root provider is never called
        diagnoses = get_diagnoses(Path.cwd)

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(diagnoses)} diagnosis(es)"
        result_obj.output = DoctorListOutput(
            errors=[],
            warnings=[],
            diagnoses=[{"name": d.name, "description": d.description, "category": d.category} for d in diagnoses],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing diagnoses...",
        progress_callback=do_work,
    )
