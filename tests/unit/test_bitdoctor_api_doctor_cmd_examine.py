"""Unit tests for doctor cmd_examine."""

import errno
import os

import pytest

from bitdoctor.api.doctor.cmd_examine import cmd_examine
from bitdoctor.api.validate_output import validate_output

pytestmark = pytest.mark.doctor


def test_cmd_examine_clean_workspace(bitdoctor_home, workspace, run_cmd):
    result = run_cmd(cmd_examine, path=str(workspace))

    assert result.success is True
    assert result.output["valid"] is True
    assert result.output["errors"] == []
    assert len(result.output["diagnoses"]) == 1
    report = result.output["diagnoses"][0]
    assert report["state"] == "valid"
    assert report["symptoms"] == ""
    assert report["manual_remedy"] == ""
    assert report["data"] == {"brokenSymlinks": [], "resolutionErrors": []}


def test_cmd_examine_reports_broken_links(bitdoctor_home, workspace, components_dir, make_link, run_cmd):
    make_link(components_dir / "pkgA" / "node_modules" / "@bit" / "foo", components_dir / "gone")

    result = run_cmd(cmd_examine, path=str(workspace / "src"))

    assert result.success is False
    assert result.output["valid"] is False
    assert result.output["errors"] == []
    report = result.output["diagnoses"][0]
    assert report["state"] == "invalid"
    assert report["manual_remedy"] == f"please delete the following paths:\n{components_dir / 'pkgA'}"
    assert "failed" in result.result


def test_cmd_examine_uses_cwd_by_default(bitdoctor_home, workspace, monkeypatch, run_cmd):
    monkeypatch.chdir(workspace)

    result = run_cmd(cmd_examine)

    assert result.success is True


def test_cmd_examine_without_workspace(bitdoctor_home, tmp_path, run_cmd):
    outside = tmp_path / "outside"
    outside.mkdir()

    result = run_cmd(cmd_examine, path=str(outside))

    assert result.success is False
    assert result.output["valid"] is False
    assert len(result.output["errors"]) == 1
    assert "No Bit workspace" in result.output["errors"][0]
    assert result.output["diagnoses"][0]["state"] == "errored"


def test_cmd_examine_reports_resolution_errors(bitdoctor_home, workspace, components_dir, make_link, monkeypatch, run_cmd):
    target = components_dir / "locked" / "foo"
    link = make_link(components_dir / "pkgA" / "node_modules" / "@bit" / "foo", target)
    real_stat = os.stat

    def fake_stat(path, *args, **kwargs):
        if os.fspath(path) == str(target):
            raise PermissionError(errno.EACCES, "Permission denied", os.fspath(path))
        return real_stat(path, *args, **kwargs)

    monkeypatch.setattr(os, "stat", fake_stat)

    result = run_cmd(cmd_examine, path=str(workspace))

    assert result.success is False
    assert result.output["valid"] is True
    assert len(result.output["errors"]) == 1
    assert str(link) in result.output["errors"][0]
    assert result.output["diagnoses"][0]["data"]["brokenSymlinks"] == []


def test_cmd_examine_by_name(bitdoctor_home, workspace, run_cmd):
    result = run_cmd(cmd_examine, "Check invalid link files", str(workspace))

    assert result.success is True
    assert [d["name"] for d in result.output["diagnoses"]] == ["Check invalid link files"]


def test_cmd_examine_unknown_name(bitdoctor_home, workspace, run_cmd):
    result = run_cmd(cmd_examine, "nope", str(workspace))

    assert result.success is False
    assert result.output["diagnoses"] == []
    assert "Unknown diagnosis" in result.output["errors"][0]


def test_cmd_examine_honors_components_dir(bitdoctor_home, write_config, workspace, make_link, run_cmd):
    write_config({"doctor": {"components_dir": "envs", "max_workers": 2}})
    make_link(workspace / ".bit" / "envs" / "pkgA" / "node_modules" / "@bit" / "foo", workspace / "gone")

    result = run_cmd(cmd_examine, path=str(workspace))

    assert result.output["valid"] is False


def test_cmd_examine_invalid_config(bitdoctor_home, write_config, workspace, run_cmd):
    write_config({"doctor": {"max_workers": 0}})

    result = run_cmd(cmd_examine, path=str(workspace))

    assert result.success is False
    assert "Failed to load config" in result.output["errors"][0]


def test_cmd_examine_output_matches_schema(bitdoctor_home, workspace, components_dir, make_link, run_cmd):
    make_link(components_dir / "pkgA" / "node_modules" / "@bit" / "foo", components_dir / "gone")

    result = run_cmd(cmd_examine, path=str(workspace))

    assert validate_output(cmd_examine, result.output) == result.output


def test_cmd_examine_reports_filesystem_failure(bitdoctor_home, workspace, monkeypatch, run_cmd):
    def denied_walk(top, *args, **kwargs):
        raise PermissionError(errno.EACCES, "Permission denied", os.fspath(top))

    monkeypatch.setattr(os, "walk", denied_walk)

    result = run_cmd(cmd_examine, path=str(workspace))

    assert result.success is False
    assert result.output["valid"] is False
    assert len(result.output["errors"]) == 1
    assert "Permission denied" in result.output["errors"][0]
    assert result.output["diagnoses"][0]["state"] == "errored"
