"""Tests for the test file fixer."""

import os

import pytest

from tfslint.core.analyzer import AnalysisError, AnalysisErrorType, AnalysisResult
from tfslint.exceptions import FileMoveError, NotFixableError
from tfslint.infrastructure.fixer import Fixer

TEST_CONTENT = """using Xunit;

namespace App.Tests
{
    public class MotorTests { }
}
"""


def directory_error(actual, expected, source="/r/src/App/Engine/Motor.cs"):
    return AnalysisError(
        type=AnalysisErrorType.InvalidDirectoryStructure,
        message="Test file is in wrong directory",
        source_file_path=source,
        actual_test_path=str(actual),
        expected_test_path=str(expected),
        incorrect_segment="App.Tests",
    )


def name_error(actual, expected):
    return AnalysisError(
        type=AnalysisErrorType.InvalidFileName,
        message=f"Test file has incorrect name. Expected: {os.path.basename(str(expected))}",
        source_file_path="/r/src/App/Motor.cs",
        actual_test_path=str(actual),
        expected_test_path=str(expected),
    )


@pytest.fixture
def fixer():
    return Fixer(".Tests")


@pytest.mark.unit
class TestNamespace:

    def test_extract_namespace(self, fixer):
        assert fixer.extract_namespace("/r/tests/Car.Tests/Engine/XTests.cs") == "Car.Tests.Engine"
        assert fixer.extract_namespace("/r/tests/Car.Tests/XTests.cs") == "Car.Tests"
        assert fixer.extract_namespace("/r/tests/Car/XTests.cs") is None

    def test_update_namespace(self, fixer):
        updated = fixer.update_namespace(
            TEST_CONTENT, "/r/tests/App.Tests/MotorTests.cs", "/r/tests/App.Tests/Engine/MotorTests.cs"
        )
        assert "namespace App.Tests.Engine" in updated

    def test_longer_namespace_is_left_alone(self, fixer):
        content = "namespace App.TestsExtra { }"
        updated = fixer.update_namespace(
            content, "/r/tests/App.Tests/MotorTests.cs", "/r/tests/App.Tests/Engine/MotorTests.cs"
        )
        assert updated == content


@pytest.mark.unit
class TestMoveTestFile:

    def test_moves_and_rewrites_namespace(self, fixer, make_tree):
        root = make_tree("tests/App.Tests/MotorTests.cs", content=TEST_CONTENT)
        actual = root / "tests" / "App.Tests" / "MotorTests.cs"
        expected = root / "tests" / "App.Tests" / "Engine" / "MotorTests.cs"

        outcome = fixer.move_test_file(directory_error(actual, expected))

        assert outcome.target == str(expected)
        assert not actual.exists()
        assert "namespace App.Tests.Engine" in expected.read_text(encoding="utf-8")

    def test_refuses_existing_target(self, fixer, make_tree):
        root = make_tree("tests/App.Tests/MotorTests.cs", "tests/App.Tests/Engine/MotorTests.cs")
        actual = root / "tests" / "App.Tests" / "MotorTests.cs"
        expected = root / "tests" / "App.Tests" / "Engine" / "MotorTests.cs"

        with pytest.raises(FileMoveError, match="already exists"):
            fixer.move_test_file(directory_error(actual, expected))
        assert actual.exists()

    def test_missing_source_file(self, fixer, temp_dir):
        actual = temp_dir / "tests" / "App.Tests" / "MotorTests.cs"
        expected = temp_dir / "tests" / "App.Tests" / "Engine" / "MotorTests.cs"

        with pytest.raises(FileMoveError):
            fixer.move_test_file(directory_error(actual, expected))


@pytest.mark.unit
class TestRenameTestFile:

    def test_rename(self, fixer, make_tree):
        root = make_tree("tests/App.Tests/MotorTest.cs")
        actual = root / "tests" / "App.Tests" / "MotorTest.cs"
        expected = root / "tests" / "App.Tests" / "MotorTests.cs"

        fixer.rename_test_file(name_error(actual, expected))

        assert expected.exists()
        assert not actual.exists()

    def test_case_only_rename(self, fixer, make_tree):
        root = make_tree("tests/App.Tests/motorTests.cs")
        actual = root / "tests" / "App.Tests" / "motorTests.cs"
        expected = root / "tests" / "App.Tests" / "MotorTests.cs"

        fixer.rename_test_file(name_error(actual, expected))

        assert os.listdir(root / "tests" / "App.Tests") == ["MotorTests.cs"]

    def test_case_only_rename_keeps_existing_target(self, fixer, make_tree):
        root = make_tree("tests/App.Tests/MotorTests.cs", content="correct")
        (root / "tests" / "App.Tests" / "motorTests.cs").write_text("stray", encoding="utf-8")
        actual = root / "tests" / "App.Tests" / "motorTests.cs"
        expected = root / "tests" / "App.Tests" / "MotorTests.cs"

        with pytest.raises(FileMoveError, match="already exists"):
            fixer.rename_test_file(name_error(actual, expected))

        assert expected.read_text(encoding="utf-8") == "correct"
        assert actual.read_text(encoding="utf-8") == "stray"

    def test_rename_refuses_existing_target(self, fixer, make_tree):
        root = make_tree("tests/App.Tests/MotorTest.cs", "tests/App.Tests/MotorTests.cs")
        actual = root / "tests" / "App.Tests" / "MotorTest.cs"

        with pytest.raises(FileMoveError, match="already exists"):
            fixer.rename_test_file(name_error(actual, root / "tests" / "App.Tests" / "MotorTests.cs"))

        assert actual.exists()


@pytest.mark.unit
class TestIsFixable:

    def test_not_in_results(self, fixer):
        fixable = fixer.is_fixable("/r/tests/App.Tests/XTests.cs", [])

        assert not fixable.is_fixable
        assert fixable.reason == "File not found in analysis results"

    def test_ambiguous_finding_is_not_fixable(self, fixer):
        error = AnalysisError(
            type=AnalysisErrorType.InvalidDirectoryStructure,
            message="Multiple matching source files found (2). Unable to determine correct source file",
            source_file_path="./src/A/X.cs, ./src/B/X.cs",
            actual_test_path="/r/tests/C.Tests/XTests.cs",
        )
        results = [AnalysisResult.for_path(error.actual_test_path, [error])]

        fixable = fixer.is_fixable("/r/tests/C.Tests/XTests.cs", results)

        assert not fixable.is_fixable
        assert fixable.reason == "File has no fixable directory structure or filename issues"
        with pytest.raises(NotFixableError):
            fixer.fix_file("/r/tests/C.Tests/XTests.cs", results)

    def test_fix_file_dispatches_rename(self, fixer, make_tree):
        root = make_tree("tests/App.Tests/MotorTest.cs")
        actual = root / "tests" / "App.Tests" / "MotorTest.cs"
        expected = root / "tests" / "App.Tests" / "MotorTests.cs"
        results = [AnalysisResult.for_path(actual, [name_error(actual, expected)])]

        outcome = fixer.fix_file(str(actual), results)

        assert outcome.target == str(expected)
        assert expected.exists()


@pytest.mark.unit
class TestFixDirectoryStructure:

    def test_skips_failures_and_other_findings(self, fixer, make_tree):
        root = make_tree(
            "tests/App.Tests/MotorTests.cs",
            "tests/App.Tests/WheelTests.cs",
            "tests/App.Tests/Chassis/WheelTests.cs",
            "tests/App.Tests/SeatTest.cs",
        )
        t = root / "tests" / "App.Tests"
        results = [
            AnalysisResult.for_path(t / "MotorTests.cs", [directory_error(t / "MotorTests.cs", t / "Engine" / "MotorTests.cs")]),
            AnalysisResult.for_path(t / "WheelTests.cs", [directory_error(t / "WheelTests.cs", t / "Chassis" / "WheelTests.cs")]),
            AnalysisResult.for_path(t / "SeatTest.cs", [name_error(t / "SeatTest.cs", t / "SeatTests.cs")]),
        ]

        outcomes = fixer.fix_directory_structure(results)

        assert [o.target for o in outcomes] == [str(t / "Engine" / "MotorTests.cs")]
        assert (t / "WheelTests.cs").exists()
        assert (t / "SeatTest.cs").exists()
