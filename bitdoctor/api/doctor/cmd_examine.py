"""Doctor examine API command.

CLI: bitdoctor doctor run [name] [--path P]
"""

import functools
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..StageResult import StageResult
from .._output_schemas.doctor import DoctorExamineOutput


def cmd_examine(name: str | None = None, path: str | None = None) -> StageResult:
    """Run diagnoses against the workspace containing ``path``.

    Args:
        name: Diagnosis name. If None, run every registered diagnosis.
        path: Directory inside the workspace (default: current directory)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.BitdoctorConfig import BitdoctorConfig
        from ..workspace.get_env_components_dir import get_env_components_dir
        from ..workspace.WorkspaceNotFoundError import WorkspaceNotFoundError
        from .DiagnosisState import DiagnosisState
        from .find_diagnosis import find_diagnosis
        from .get_diagnoses import get_diagnoses

        errors: list[str] = []
        warnings: list[str] = []
        reports: list[dict[str, Any]] = []

        def _fail(message: str) -> None:
            errors.append(message)
            result_obj.output = DoctorExamineOutput(
                errors=errors,
                warnings=warnings,
                valid=False,
                diagnoses=reports,
            ).model_dump(mode="python")
            result_obj.result = f"Doctor failed: {message}"
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = BitdoctorConfig.load()
        except ValueError as e:
            _fail(f"Failed to load config: {e}")
            return

        start = Path(path).expanduser() if path else Path.cwd()
        get_root_dir = functools.partial(get_env_components_dir, start, config.doctor.components_dir)
        diagnoses = get_diagnoses(get_root_dir, max_workers=config.doctor.max_workers)

        if name is not None:
            try:
                diagnoses = [find_diagnosis(name, diagnoses)]
            except ValueError as e:
                _fail(str(e))
                return

        total = len(diagnoses)
        for index, diagnosis in enumerate(diagnoses):
            yield (0.2 + 0.7 * index / total, f"Examining '{diagnosis.name}'...")
            try:
                examined = diagnosis.examine()
            except (WorkspaceNotFoundError, OSError) as e:
                errors.append(f"{diagnosis.name}: {e}")
                reports.append(
                    {
                        "name": diagnosis.name,
                        "description": diagnosis.description,
                        "category": diagnosis.category,
                        "state": DiagnosisState.ERRORED.value,
                        "valid": False,
                        "symptoms": "",
                        "manual_remedy": "",
                        "data": {},
                    }
                )
                continue

            data = examined.data
            for failure in data.resolution_errors:
                errors.append(f"{diagnosis.name}: {failure.symlink_path}: {failure.error}")

            reports.append(
                {
                    "name": diagnosis.name,
                    "description": diagnosis.description,
                    "category": diagnosis.category,
                    "state": diagnosis.state.value,
                    "valid": examined.valid,
                    "symptoms": "" if examined.valid else diagnosis.format_symptoms(),
                    "manual_remedy": "" if examined.valid else diagnosis.format_manual_remedy(),
                    "data": data.to_dict(),
                }
            )

        yield (1.0, "Complete")
        failed = [r["name"] for r in reports if not r["valid"]]
        all_valid = not failed

        if errors:
            result_obj.result = f"Doctor finished with {len(errors)} error(s)"
        elif failed:
            result_obj.result = f"{len(failed)} of {total} diagnosis(es) failed: {', '.join(failed)}"
        else:
            result_obj.result = f"All {total} diagnosis(es) passed"

        result_obj.output = DoctorExamineOutput(
            errors=errors,
            warnings=warnings,
            valid=all_valid,
            diagnoses=reports,
        ).model_dump(mode="python")
        result_obj.success = all_valid and not errors

    announce = f"Running diagnosis '{name}'..." if name else "Running all diagnoses..."
    return StageResult(
        announce=announce,
        progress_callback=do_work,
    )
