"""Unit tests for bitdoctor.api.config."""

import pytest

from bitdoctor.api.config.BitdoctorConfig import BitdoctorConfig
from bitdoctor.api.config.cmd_show import cmd_show
from bitdoctor.api.config.cmd_version import cmd_version
from bitdoctor.api.config.get_home_dir import get_home_dir

pytestmark = pytest.mark.config


def test_home_dir_from_env(bitdoctor_home):
    assert get_home_dir() == bitdoctor_home.resolve()


def test_home_dir_default(monkeypatch, tmp_path):
    monkeypatch.delenv("BITDOCTOR_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_home_dir() == tmp_path / ".bitdoctor"


def test_load_without_file_uses_defaults(bitdoctor_home):
    config = BitdoctorConfig.load()

    assert config.doctor.max_workers is None
    assert config.doctor.components_dir == "components"
    assert config.log.level == "INFO"


def test_load_from_file(bitdoctor_home, write_config):
    write_config({"doctor": {"max_workers": 4}, "log": {"level": "DEBUG"}})

    config = BitdoctorConfig.load()

    assert config.doctor.max_workers == 4
    assert config.doctor.components_dir == "components"
    assert config.log.level == "DEBUG"


def test_load_invalid_json(bitdoctor_home):
    (bitdoctor_home / "config.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid JSON"):
        BitdoctorConfig.load()


@pytest.mark.parametrize(
    "raw, field",
    [
        ({"doctor": {"max_workers": 0}}, "doctor.max_workers"),
        ({"doctor": {"unknown": 1}}, "doctor.unknown"),
        ({"log": {"level": "LOUD"}}, "log.level"),
        ({"extra": {}}, "extra"),
    ],
)
def test_load_validation_error_names_field(bitdoctor_home, write_config, raw, field):
    write_config(raw)

    with pytest.raises(ValueError, match=f"Configuration validation error: {field}"):
        BitdoctorConfig.load()


def test_cmd_show_lists_sections(bitdoctor_home, run_cmd):
    result = run_cmd(cmd_show)

    assert result.success is True
    assert result.output["content"] == {"sections": ["doctor", "log"]}
    assert result.output["config_path"] == str(bitdoctor_home.resolve() / "config.json")


def test_cmd_show_section(bitdoctor_home, write_config, run_cmd):
    write_config({"doctor": {"max_workers": 3}})

    result = run_cmd(cmd_show, "doctor")

    assert result.success is True
    assert result.output["content"] == {"max_workers": 3, "components_dir": "components"}


def test_cmd_show_unknown_section(bitdoctor_home, run_cmd):
    result = run_cmd(cmd_show, "nope")

    assert result.success is False
    assert result.output["errors"] == ["Unknown section: nope"]


def test_cmd_show_invalid_config(bitdoctor_home, write_config, run_cmd):
    write_config({"doctor": {"max_workers": -1}})

    result = run_cmd(cmd_show, "doctor")

    assert result.success is False
    assert result.output["content"] == {}


def test_cmd_version(run_cmd):
    result = run_cmd(cmd_version)

    assert result.success is True
    assert result.output["version"]
