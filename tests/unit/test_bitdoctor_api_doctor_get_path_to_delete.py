"""Unit tests for bitdoctor.api.doctor.get_path_to_delete."""

import os

import pytest

from bitdoctor.api.doctor.get_path_to_delete import get_path_to_delete

pytestmark = pytest.mark.doctor


def _p(*parts: str) -> str:
    return os.sep + os.path.join(*parts)


def test_returns_directory_above_marker():
    symlink = _p("env", "components", "pkgA", "node_modules", "@bit", "foo")
    assert get_path_to_delete(symlink) == _p("env", "components", "pkgA")


def test_uses_first_marker_occurrence():
    symlink = _p("env", "components", "pkgA", "node_modules", "@bit", "foo", "node_modules", "@bit", "bar")
    assert get_path_to_delete(symlink) == _p("env", "components", "pkgA")


def test_marker_only_matches_whole_segments():
    symlink = _p("env", "components", "foo_node_modules", "@bit", "x", "node_modules", "@bit", "foo")
    path_to_delete = get_path_to_delete(symlink)

    assert path_to_delete == _p("env", "components", "foo_node_modules", "@bit", "x")
    assert symlink.startswith(path_to_delete + os.sep)


def test_marker_prefix_of_longer_segment_is_ignored():
    with pytest.raises(ValueError, match="no environment directory"):
        get_path_to_delete(_p("env", "components", "pkgA", "node_modules", "@bitx", "foo"))


def test_scope_directory_itself():
    assert get_path_to_delete(_p("env", "components", "pkgA", "node_modules", "@bit")) == _p("env", "components", "pkgA")


def test_result_is_strict_ancestor():
    symlink = _p("env", "components", "pkgA", "1.0.0", "node_modules", "@bit", "foo")
    path_to_delete = get_path_to_delete(symlink)

    assert symlink.startswith(path_to_delete + os.sep)
    assert path_to_delete != symlink


def test_does_not_touch_filesystem(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("filesystem accessed")

    monkeypatch.setattr(os, "stat", boom)
    monkeypatch.setattr(os, "lstat", boom)
    monkeypatch.setattr(os, "readlink", boom)

    symlink = _p("nowhere", "pkgA", "node_modules", "@bit", "foo")
    assert get_path_to_delete(symlink) == get_path_to_delete(symlink) == _p("nowhere", "pkgA")


def test_missing_marker_raises():
    with pytest.raises(ValueError, match="no environment directory"):
        get_path_to_delete(_p("env", "components", "pkgA", "node_modules", "lodash"))
