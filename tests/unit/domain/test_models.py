from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Result factories (success/error).
2. Immutability of frozen dataclasses.
3. Error hierarchy and messages.
"""

import dataclasses

import pytest

from shelltree.domain.config import get_default_config
from shelltree.domain.errors import (
    DirectoryTreeError,
    MalformedInputError,
    NoCandidateError,
    NoParentError,
    ShellTreeError,
)
from shelltree.domain.pipeline_models import (
    AnalysisResult,
    create_error_result,
    create_success_result,
)
from shelltree.domain.tree_models import DirectoryNode, FileNode


def test_create_success_result_populates_fields():
    cfg = get_default_config()

    result = create_success_result(
        cfg=cfg,
        input_path="/tmp/input.txt",
        total_under_threshold=95437,
        smallest_to_delete=24933642,
        used_space=48381165,
        directory_count=4,
        file_count=10,
        tree_lines=["/ (dir, size=48381165)"],
    )

    assert isinstance(result, AnalysisResult)
    assert result.ok is True
    assert result.error == ""
    assert result.threshold == 100_000
    assert result.disk_capacity == 70_000_000
    assert result.required_free == 30_000_000
    assert result.total_under_threshold == 95437
    assert result.tree_lines == ["/ (dir, size=48381165)"]
    assert result.summary == {}


def test_create_error_result_handles_defaults():
    result = create_error_result("boom", {}, "/tmp/input.txt")

    assert result.ok is False
    assert result.error == "boom"
    assert result.total_under_threshold is None
    assert result.smallest_to_delete is None
    assert result.tree_lines == []


def test_result_is_frozen():
    result = create_error_result("boom", {}, "/tmp/input.txt")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.ok = True


def test_file_node_is_frozen_directory_node_is_mutable():
    f = FileNode(name="x", parent=0, size=3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        f.size = 4

    d = DirectoryNode(name="d", parent=0)
    d.size += 5
    assert d.size == 5
    assert d.children == []


def test_error_hierarchy():
    assert issubclass(NoParentError, DirectoryTreeError)
    assert issubclass(DirectoryTreeError, ShellTreeError)
    assert issubclass(MalformedInputError, ShellTreeError)
    assert not issubclass(MalformedInputError, DirectoryTreeError)


def test_error_messages():
    assert str(NoParentError()) == "Directory '/' has no parent"
    assert str(NoCandidateError(42)) == "No directory with size >= 42"
    assert str(MalformedInputError("Bad", "x")) == "Bad ('x')"
