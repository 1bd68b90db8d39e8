import pytest

from tridinspect.error_handling import (
    ERROR_SIGNATURES,
    EmptyDefinitionsPackageError,
    ErrorCategory,
    TridError,
    UnknownFileTypeError,
    classify_output,
    error_for,
    raise_for_output,
)


@pytest.mark.parametrize(
    "output, expected",
    [
        ("Error: you have to specify at least one file to analyze.", ErrorCategory.NO_FILE_SPECIFIED),
        ("Error: No definitions available!", ErrorCategory.NO_DEFINITIONS),
        ("Def package ./empty_def is empty!", ErrorCategory.EMPTY_DEFINITIONS_PACKAGE),
        ("Error: found no file(s) to analyze!", ErrorCategory.FILE_NOT_FOUND),
        ("Collecting data from file: x\n Unknown!", ErrorCategory.UNKNOWN_FILE_TYPE),
    ],
)
def test_classify_known_phrases(output, expected):
    assert classify_output(output) is expected


def test_classify_clean_report_returns_none(pdf_report):
    assert classify_output(pdf_report) is None
    assert classify_output("") is None


def test_empty_package_requires_both_phrases():
    assert classify_output("Def package ./defs loaded") is None
    assert classify_output("Error: is empty!") is None


def test_priority_order():
    output = "No definitions available!\nDef package x is empty!\nUnknown!"
    assert classify_output(output) is ErrorCategory.NO_DEFINITIONS
    assert [s.category for s in ERROR_SIGNATURES][-1] is ErrorCategory.UNKNOWN_FILE_TYPE


def test_matching_is_case_sensitive():
    assert classify_output("unknown!") is None
    assert classify_output("NO DEFINITIONS AVAILABLE!") is None


def test_unknown_marker_inside_remarks_is_classified():
    # Known ambiguity: the marker is matched anywhere in the output.
    output = "40.0% (.dat) Data\n  Remarks: Unknown! variant\n"
    assert classify_output(output) is ErrorCategory.UNKNOWN_FILE_TYPE


def test_raise_for_output():
    with pytest.raises(EmptyDefinitionsPackageError) as exc_info:
        raise_for_output("Def package ./d is empty!")
    assert exc_info.value.category is ErrorCategory.EMPTY_DEFINITIONS_PACKAGE
    assert "is empty!" in exc_info.value.output

    raise_for_output("10.0% (.ps) PostScript")


def test_error_for_builds_matching_subclass():
    error = error_for(ErrorCategory.UNKNOWN_FILE_TYPE)
    assert isinstance(error, UnknownFileTypeError)
    assert isinstance(error, TridError)
    assert error.to_dict() == {"category": "unknown_file_type", "message": "unknown file type"}
