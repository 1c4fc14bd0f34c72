"""Tests for the test runner script."""
import sys
from unittest.mock import Mock, patch

import run_tests


class TestBuildCommand:
    def test_default_runs_whole_suite_verbose(self):
        command = run_tests.build_command()
        assert command[:3] == [sys.executable, "-m", "pytest"]
        assert "-v" in command
        assert command[-1] == "tests/"

    def test_quick(self):
        command = run_tests.build_command(quick=True)
        assert "-x" in command and "-v" not in command

    def test_pytest_args_replace_default_path(self):
        command = run_tests.build_command(pytest_args=["-k", "engine"])
        assert command[-2:] == ["-k", "engine"]
        assert "tests/" not in command


class TestMain:
    @patch("run_tests.subprocess.run")
    def test_passes_unknown_arguments_to_pytest(self, mock_run):
        mock_run.return_value = Mock(returncode=0)
        assert run_tests.main(["--quick", "tests/test_engine.py"]) == 0
        command = mock_run.call_args[0][0]
        assert command[-1] == "tests/test_engine.py"
        assert "-x" in command
        assert mock_run.call_args[1]["cwd"] == run_tests.PROJECT_DIR

    @patch("run_tests.subprocess.run")
    def test_returns_pytest_exit_code(self, mock_run):
        mock_run.return_value = Mock(returncode=1)
        assert run_tests.main([]) == 1
