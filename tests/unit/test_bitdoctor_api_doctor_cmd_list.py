"""Unit tests for doctor cmd_list."""

import pytest

from bitdoctor.api.doctor.cmd_list import cmd_list

pytestmark = pytest.mark.doctor


def test_cmd_list_returns_registered_diagnoses(run_cmd):
    result = run_cmd(cmd_list)

    assert result.success is True
    assert result.output["diagnoses"] == [
        {
            "name": "Check invalid link files",
            "description": "Validate Bit generated symlink files within environment directory",
            "category": "bit-core-files",
        }
    ]
    assert result.output["errors"] == []
