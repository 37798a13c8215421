"""Tests for filesystem discovery and analyze_project."""

import os

import pytest

from tfslint.core.analyzer import AnalysisErrorType, AnalyzerOptions
from tfslint.infrastructure.discovery import analyze_project, find_source_files, find_test_files


@pytest.mark.unit
class TestFindSourceFiles:

    def test_finds_files_recursively_sorted(self, make_tree):
        root = make_tree("src/B/Z.cs", "src/A/Sub/Y.cs", "src/A/X.cs", "src/A/readme.md")

        files = find_source_files(root / "src", ".cs")

        assert files == [
            str(root / "src" / "A" / "Sub" / "Y.cs"),
            str(root / "src" / "A" / "X.cs"),
            str(root / "src" / "B" / "Z.cs"),
        ]

    def test_prunes_ignored_directories(self, make_tree):
        root = make_tree("src/A/X.cs", "src/A/obj/Gen.cs", "src/A/bin/Debug/Out.cs", "src/A/object/Y.cs")

        files = find_source_files(root / "src", ".cs", ignore_directories=["bin", "obj"])

        assert [os.path.basename(f) for f in files] == ["X.cs", "Y.cs"]

    def test_multi_segment_ignored_directory(self, make_tree):
        root = make_tree("src/A/bin/Debug/Out.cs", "src/A/bin/Keep.cs")

        files = find_source_files(root / "src", ".cs", ignore_directories=["bin/Debug"])

        assert [os.path.basename(f) for f in files] == ["Keep.cs"]

    def test_ignored_file_names_are_case_insensitive(self, make_tree):
        root = make_tree("src/A/GlobalUsings.cs", "src/A/X.cs")

        files = find_source_files(root / "src", ".cs", ignore_files=["globalusings.cs"])

        assert [os.path.basename(f) for f in files] == ["X.cs"]

    def test_missing_root_returns_empty_list(self, temp_dir):
        assert find_source_files(temp_dir / "nowhere", ".cs") == []


@pytest.mark.unit
class TestFindTestFiles:

    def test_requires_suffix_and_test_project(self, make_tree):
        root = make_tree(
            "tests/App.Tests/FooTests.cs",
            "tests/App.Tests/Helpers.cs",
            "tests/RootTests.cs",
            "tests/App/BarTests.cs",
            "tests/Tests.Common/SharedTests.cs",
        )

        files = find_test_files(
            root / "tests", ".cs", "Tests", test_project_suffix=".Tests"
        )

        assert files == [str(root / "tests" / "App.Tests" / "FooTests.cs")]

    def test_empty_project_suffix_accepts_any_project(self, make_tree):
        root = make_tree("tests/App/BarTests.cs")

        files = find_test_files(root / "tests", ".cs", "Tests")

        assert files == [str(root / "tests" / "App" / "BarTests.cs")]


@pytest.mark.unit
class TestAnalyzeProject:

    def test_clean_project(self, make_tree, project_options):
        make_tree("src/App/Foo.cs", "tests/App.Tests/FooTests.cs")

        report = analyze_project(project_options)

        assert report.results == []
        assert report.total_files == 2
        assert not report.has_issues

    def test_reports_findings(self, make_tree, project_options):
        root = make_tree(
            "src/App/Engine/Motor.cs",
            "src/App/Foo.cs",
            "tests/App.Tests/MotorTests.cs",
        )

        report = analyze_project(project_options)

        by_type = {r.errors[0].type: r for r in report.results}
        assert set(by_type) == {AnalysisErrorType.InvalidDirectoryStructure, AnalysisErrorType.MissingTest}
        misplaced = by_type[AnalysisErrorType.InvalidDirectoryStructure].errors[0]
        assert misplaced.expected_test_path == str(root / "tests" / "App.Tests" / "Engine" / "MotorTests.cs")
        missing = by_type[AnalysisErrorType.MissingTest]
        assert missing.test_file_path == str(root / "tests" / "App.Tests" / "FooTests.cs")
        assert report.total_files == 3

    def test_relative_roots_are_resolved(self, make_tree, in_temp_dir):
        make_tree("src/App/Foo.cs", "tests/App.Tests/FooTests.cs")

        report = analyze_project(AnalyzerOptions())

        assert report.total_files == 2
        assert report.results == []

    def test_checkout_below_ignored_directory_name(self, make_tree, temp_dir):
        checkout = temp_dir / "obj" / "checkout"
        make_tree("obj/checkout/src/App/Engine/Motor.cs", "obj/checkout/tests/App.Tests/MotorTests.cs")

        report = analyze_project(
            AnalyzerOptions(src_root=str(checkout / "src"), test_root=str(checkout / "tests"))
        )

        assert report.total_files == 2
        assert [r.errors[0].type for r in report.results] == [AnalysisErrorType.InvalidDirectoryStructure]
