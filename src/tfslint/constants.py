"""
Application-wide constants for tfslint.

Defaults follow the .NET layout the linter was built for:
``src/<Project>/<Sub>/Foo.cs`` is tested by
``tests/<Project>.Tests/<Sub>/FooTests.cs``.
"""

# Analyzer defaults
DEFAULT_SRC_ROOT = "src"
DEFAULT_TEST_ROOT = "tests"
DEFAULT_FILE_EXTENSION = ".cs"
DEFAULT_TEST_FILE_SUFFIX = "Tests"
DEFAULT_TEST_PROJECT_SUFFIX = ".Tests"
DEFAULT_IGNORE_DIRECTORIES = ("bin", "obj", "node_modules")

# Test projects named "Tests.<Something>" are helper projects, not test projects
HELPER_PROJECT_PREFIX = "Tests."

# Display prefixes for paths in reports
SRC_DISPLAY_ROOT = "./src"
TESTS_DISPLAY_ROOT = "./tests"
SOURCE_PATH_SEPARATOR = ", "

# Reporting
DEFAULT_REPORT_DIRECTORY = "test-filestructure-linter-output"
REPORT_FILE_PREFIX = "results"
REPORT_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"
ISSUE_RATE_PRECISION = 1

# Configuration
DEFAULT_CONFIG_FILENAME = "tfslint.toml"
ENV_PREFIX = "TFSLINT_"

# Logging
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
MIN_LOG_FILE_SIZE_BYTES = 1024
DEFAULT_LOG_BACKUP_COUNT = 5

# CLI exit codes
EXIT_SUCCESS = 0
EXIT_FINDINGS = 1
EXIT_INTERNAL_ERROR = 2
EXIT_CONFIGURATION_ERROR = 3
EXIT_USAGE_ERROR = 4
EXIT_FIX_ERROR = 5
EXIT_CANCELLED = 130
