"""
Unit tests for domain models.
"""

import dataclasses

import pytest

from moonc.domain.exceptions import UsageError
from moonc.domain.models import (
    BatchRequest,
    CompilerConfig,
    CompileOutcome,
    Compiled,
    CompiledToStdout,
    CompileFailed,
    ReadFailed,
    WriteFailed,
    TimingReport,
)


class TestCompilerConfig:
    """Test CompilerConfig model."""

    def test_defaults(self):
        config = CompilerConfig()

        assert config.reserve_line_numbers is False
        assert config.extra_args == ()

    def test_is_immutable(self):
        config = CompilerConfig(reserve_line_numbers=True)

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.reserve_line_numbers = False


class TestBatchRequest:
    """Test BatchRequest model."""

    def test_create_valid_request(self):
        request = BatchRequest(files=["a.moon", "b.moon"], target_dir="out")

        assert request.files == ("a.moon", "b.moon")
        assert request.target_dir == "out"
        assert request.write_to_disk is True
        assert request.dump_timing is False

    def test_explicit_output_with_single_file(self):
        request = BatchRequest(files=["a.moon"], explicit_output_file="x.lua")

        assert request.explicit_output_file == "x.lua"

    def test_explicit_output_with_multiple_files_is_usage_error(self):
        with pytest.raises(UsageError, match="-o can not be used with multiple input files"):
            BatchRequest(files=["a.moon", "b.moon"], explicit_output_file="x.lua")


class TestOutcomes:
    """Test outcome success flags and console text."""

    def test_success_flags(self):
        assert Compiled("a.moon", output_path="a.lua", bytes_written=3).success
        assert TimingReport("a.moon", parse_ms=1.0, compile_ms=2.0).success
        assert not CompiledToStdout("a.moon", text="x").success
        assert not CompileFailed("a.moon", diagnostic="bad").success
        assert not ReadFailed("a.moon").success
        assert not WriteFailed("a.moon", output_path="a.lua").success

    def test_base_outcome_is_abstract(self):
        with pytest.raises(TypeError):
            CompileOutcome("a.moon")

    def test_render_messages(self):
        assert Compiled("a.moon", output_path="a.lua").render() == "Built a.moon"
        assert ReadFailed("a.moon").render() == "Fail to read file: a.moon."
        assert WriteFailed("a.moon", output_path="out/a.lua").render() == "Fail to write file: out/a.lua."
        assert CompiledToStdout("a.moon", text="print 1").render() == "print 1"

    def test_compile_failed_keeps_diagnostic_verbatim(self):
        diagnostic = "1: syntax error\n  x = \n    ^"
        outcome = CompileFailed("a.moon", diagnostic=diagnostic)

        assert outcome.render() == f"Fail to compile: a.moon.\n{diagnostic}"

    def test_timing_report(self):
        report = TimingReport("a.moon", parse_ms=1.5, compile_ms=2.25)

        assert report.total_ms == pytest.approx(3.75)
        assert report.render() == (
            "a.moon \n"
            "Parse time:     1.5 ms\n"
            "Compile time:   2.25 ms\n"
        )

    def test_timing_report_uses_five_significant_digits(self):
        report = TimingReport("a.moon", parse_ms=1.234567, compile_ms=12345.678)

        assert "Parse time:     1.2346 ms" in report.render()
        assert "Compile time:   12346 ms" in report.render()
