"""Tests for leaf-directory disambiguation of source files."""

import os

import pytest

from tfslint.core.analyzer.models import AnalyzerOptions, FileRecord
from tfslint.core.analyzer.resolver import (
    leaf_source_directory,
    leaf_test_directory,
    resolve_ambiguous_match,
)

ROOT = os.path.abspath(os.sep + "repo")
SRC = os.path.join(ROOT, "src")
TESTS = os.path.join(ROOT, "tests")
OPTIONS = AnalyzerOptions(src_root=SRC, test_root=TESTS)


def record(*parts):
    return FileRecord.from_path(os.path.join(*parts), ".cs")


@pytest.mark.unit
class TestLeafDirectories:

    def test_test_project_suffix_is_stripped_at_project_level(self):
        test_file = record(TESTS, "Car.Tests", "HandlerTests.cs")
        assert leaf_test_directory(test_file, OPTIONS) == "Car"

    def test_nested_leaf_is_kept(self):
        test_file = record(TESTS, "Car.Tests", "Engine", "HandlerTests.cs")
        assert leaf_test_directory(test_file, OPTIONS) == "Engine"

    def test_file_directly_under_root_has_no_leaf(self):
        assert leaf_test_directory(record(TESTS, "HandlerTests.cs"), OPTIONS) is None

    def test_source_leaf(self):
        assert leaf_source_directory(record(SRC, "Car", "Engine", "Handler.cs"), OPTIONS) == "Engine"


@pytest.mark.unit
class TestResolveAmbiguousMatch:

    def test_resolves_by_project_directory(self):
        candidates = [record(SRC, "Bus", "Handler.cs"), record(SRC, "Car", "Handler.cs")]
        test_file = record(TESTS, "Car.Tests", "HandlerTests.cs")

        assert resolve_ambiguous_match(test_file, candidates, OPTIONS) is candidates[1]

    def test_comparison_ignores_case(self):
        candidates = [record(SRC, "Bus", "Handler.cs"), record(SRC, "Car", "engine", "Handler.cs")]
        test_file = record(TESTS, "Car.Tests", "Engine", "HandlerTests.cs")

        assert resolve_ambiguous_match(test_file, candidates, OPTIONS) is candidates[1]

    def test_first_candidate_wins_on_leaf_collision(self):
        candidates = [
            record(SRC, "Bus", "Engine", "Handler.cs"),
            record(SRC, "Car", "Engine", "Handler.cs"),
        ]
        test_file = record(TESTS, "Car.Tests", "Engine", "HandlerTests.cs")

        assert resolve_ambiguous_match(test_file, candidates, OPTIONS) is candidates[0]

    def test_no_matching_leaf(self):
        candidates = [record(SRC, "Bus", "Handler.cs"), record(SRC, "Car", "Handler.cs")]
        test_file = record(TESTS, "Train.Tests", "HandlerTests.cs")

        assert resolve_ambiguous_match(test_file, candidates, OPTIONS) is None
