import subprocess
from unittest.mock import Mock, patch

import pytest

from tridinspect.config_schemas import ScanOptions
from tridinspect.core.process_runner import ProcessOutcome, ProcessRunner, ProcessStatus
from tridinspect.core.scanner import TridScanner, scan
from tridinspect.error_handling import (
    EmptyDefinitionsPackageError,
    ErrorCategory,
    ExecutionError,
    InvalidMatchCountError,
    NoDefinitionsError,
    NoFileSpecifiedError,
    ScanTimeoutError,
    TridFileNotFoundError,
    UnknownFileTypeError,
)


def _scanner_with_outcome(outcome, options=None):
    runner = Mock(spec=ProcessRunner)
    runner.run.return_value = outcome
    return TridScanner(options or ScanOptions(), runner=runner), runner


def test_empty_path_fails_before_running():
    scanner, runner = _scanner_with_outcome(ProcessOutcome(ProcessStatus.OK))
    with pytest.raises(NoFileSpecifiedError):
        scanner.scan("", 1)
    runner.run.assert_not_called()


def test_missing_file_fails_before_running(tmp_path):
    scanner, runner = _scanner_with_outcome(ProcessOutcome(ProcessStatus.OK))
    with pytest.raises(TridFileNotFoundError) as exc_info:
        scanner.scan(str(tmp_path / "non_existent_file.txt"), 1)
    assert exc_info.value.category is ErrorCategory.FILE_NOT_FOUND
    runner.run.assert_not_called()


def test_zero_matches_fails_before_running(sample_file):
    scanner, runner = _scanner_with_outcome(ProcessOutcome(ProcessStatus.OK))
    with pytest.raises(InvalidMatchCountError):
        scanner.scan(str(sample_file), 0)
    runner.run.assert_not_called()


def test_missing_file_checked_before_match_count(tmp_path):
    scanner, _ = _scanner_with_outcome(ProcessOutcome(ProcessStatus.OK))
    with pytest.raises(TridFileNotFoundError):
        scanner.scan(str(tmp_path / "missing"), 0)


def test_other_stat_failures_are_execution_errors(sample_file):
    scanner, runner = _scanner_with_outcome(ProcessOutcome(ProcessStatus.OK))
    with patch("tridinspect.core.scanner.os.stat", side_effect=PermissionError(13, "denied")):
        with pytest.raises(ExecutionError) as exc_info:
            scanner.scan(str(sample_file), 1)
    assert isinstance(exc_info.value.__cause__, PermissionError)
    runner.run.assert_not_called()


def test_null_byte_path_is_execution_error():
    scanner, runner = _scanner_with_outcome(ProcessOutcome(ProcessStatus.OK))
    with pytest.raises(ExecutionError) as exc_info:
        scanner.scan("bad\x00name.pdf", 1)
    assert isinstance(exc_info.value.__cause__, ValueError)
    runner.run.assert_not_called()


def test_build_args_without_definitions():
    scanner = TridScanner()
    assert scanner.build_args("/tmp/a.bin", 3) == ["-v", "-n:3", "/tmp/a.bin"]


def test_build_args_with_definitions():
    scanner = TridScanner(ScanOptions(definitions="/opt/trid/triddefs.trd"))
    assert scanner.build_args("a.bin", 1) == ["-v", "-n:1", "-d:/opt/trid/triddefs.trd", "a.bin"]


def test_scan_runs_configured_command(sample_file, pdf_report):
    options = ScanOptions(cmd="/usr/local/bin/trid", timeout=12)
    scanner, runner = _scanner_with_outcome(
        ProcessOutcome(ProcessStatus.OK, output=pdf_report, returncode=0), options
    )

    records = scanner.scan(str(sample_file), 2)

    runner.run.assert_called_once_with(
        "/usr/local/bin/trid", ["-v", "-n:2", str(sample_file)], 12.0
    )
    assert [r.extension for r in records] == [".pdf", ".ps"]
    assert records[0].mime_type == "application/pdf"


def test_scan_with_fake_popen(sample_file, fake_popen, pdf_report):
    popen = fake_popen(output=pdf_report.encode())
    scanner = TridScanner(runner=ProcessRunner(popen_factory=popen))

    records = scanner.scan(str(sample_file), 1)

    assert popen.calls[0][0] == ["trid", "-v", "-n:1", str(sample_file)]
    assert records[0].probability == 85.5


def test_scan_without_matches_returns_empty_list(sample_file):
    scanner, _ = _scanner_with_outcome(
        ProcessOutcome(ProcessStatus.OK, output="TrID/32 - File Identifier\n", returncode=0)
    )
    assert scanner.scan(str(sample_file), 1) == []


def test_empty_definitions_package_skips_parsing(sample_file):
    output = "Def package ./testdata/empty_def is empty!\n"
    scanner, _ = _scanner_with_outcome(ProcessOutcome(ProcessStatus.OK, output=output, returncode=0))

    with patch("tridinspect.core.scanner.parse_output") as parser:
        with pytest.raises(EmptyDefinitionsPackageError):
            scanner.scan(str(sample_file), 1)
    parser.assert_not_called()


def test_unknown_file_type(sample_file):
    output = "Collecting data from file: sample.unknown\n\n Unknown!\n"
    scanner, _ = _scanner_with_outcome(ProcessOutcome(ProcessStatus.OK, output=output, returncode=0))
    with pytest.raises(UnknownFileTypeError):
        scanner.scan(str(sample_file), 1)


def test_classified_error_wins_over_nonzero_exit(sample_file):
    error = subprocess.CalledProcessError(1, ["trid"])
    outcome = ProcessOutcome(
        ProcessStatus.NONZERO_EXIT, output="No definitions available!", returncode=1, error=error
    )
    scanner, _ = _scanner_with_outcome(outcome)
    with pytest.raises(NoDefinitionsError):
        scanner.scan(str(sample_file), 1)


def test_timeout_is_distinct_from_execution_failure(sample_file):
    cause = subprocess.TimeoutExpired(["trid"], 1)
    scanner, _ = _scanner_with_outcome(
        ProcessOutcome(ProcessStatus.TIMEOUT, output="Analyzing...", error=cause),
        ScanOptions(timeout=1),
    )

    with pytest.raises(ScanTimeoutError) as exc_info:
        scanner.scan(str(sample_file), 1)

    assert not isinstance(exc_info.value, ExecutionError)
    assert exc_info.value.__cause__ is cause
    assert exc_info.value.output == "Analyzing..."
    assert "command timed out" in str(exc_info.value)


def test_classified_error_wins_over_timeout(sample_file):
    cause = subprocess.TimeoutExpired(["trid"], 1)
    scanner, _ = _scanner_with_outcome(
        ProcessOutcome(ProcessStatus.TIMEOUT, output="Unknown!", error=cause)
    )
    with pytest.raises(UnknownFileTypeError):
        scanner.scan(str(sample_file), 1)


def test_failed_start_is_execution_error(sample_file):
    cause = FileNotFoundError(2, "No such file or directory")
    scanner, _ = _scanner_with_outcome(ProcessOutcome(ProcessStatus.FAILED_TO_START, error=cause))

    with pytest.raises(ExecutionError) as exc_info:
        scanner.scan(str(sample_file), 1)

    assert exc_info.value.category is ErrorCategory.EXECUTION_FAILURE
    assert exc_info.value.__cause__ is cause


def test_unclassified_nonzero_exit_is_execution_error(sample_file):
    error = subprocess.CalledProcessError(5, ["trid"], output="segfault")
    scanner, _ = _scanner_with_outcome(
        ProcessOutcome(ProcessStatus.NONZERO_EXIT, output="segfault", returncode=5, error=error)
    )
    with pytest.raises(ExecutionError):
        scanner.scan(str(sample_file), 1)


def test_non_existent_command(sample_file):
    scanner = TridScanner(ScanOptions(cmd="/unknown-command"))
    with pytest.raises(ExecutionError):
        scanner.scan(str(sample_file), 1)


def test_module_level_scan_validates_input():
    with pytest.raises(NoFileSpecifiedError):
        scan("")


def test_from_config(tmp_path):
    from tridinspect.config import Config

    path = tmp_path / "config.json"
    path.write_text('{"trid": {"definitions": "/defs.trd"}}')
    config = Config(str(path), use_env=False)
    scanner = TridScanner.from_config(config)
    assert scanner.options == ScanOptions(cmd="trid", definitions="/defs.trd", timeout=30.0)
