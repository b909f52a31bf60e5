"""Tests for output formatting."""

import io
import json

from rich.console import Console

from steprun.output import OutputContext, get_output_context, set_output_context


def make_context(json_mode: bool = False) -> tuple[OutputContext, io.StringIO]:
    """Create an output context writing to a buffer."""
    output = io.StringIO()
    console = Console(file=output, force_terminal=False)
    return OutputContext(console=console, json_mode=json_mode), output


class TestOutputContextPrint:
    """Tests for OutputContext.print method."""

    def test_print_in_normal_mode(self) -> None:
        ctx, output = make_context()
        ctx.print("Hello world")
        assert "Hello world" in output.getvalue()

    def test_print_suppressed_in_json_mode(self) -> None:
        ctx, output = make_context(json_mode=True)
        ctx.print("Hello world")
        assert output.getvalue() == ""


class TestOutputContextError:
    """Tests for OutputContext.error method."""

    def test_error_in_normal_mode(self) -> None:
        ctx, output = make_context()
        ctx.error("Something failed")
        assert "Error: Something failed" in output.getvalue()

    def test_error_keeps_brackets(self) -> None:
        """Messages are not interpreted as Rich markup."""
        ctx, output = make_context()
        ctx.error("step [red] failed")
        assert "step [red] failed" in output.getvalue()

    def test_error_json_with_data(self, capsys) -> None:
        ctx, _ = make_context(json_mode=True)
        ctx.error("Failed", {"index": 2})
        data = json.loads(capsys.readouterr().out)
        assert data == {"error": "Failed", "index": 2}


class TestOutputContextSuccess:
    """Tests for OutputContext.success method."""

    def test_success_in_normal_mode(self) -> None:
        ctx, output = make_context()
        ctx.success("Done")
        assert "Done" in output.getvalue()

    def test_success_json(self, capsys) -> None:
        ctx, _ = make_context(json_mode=True)
        ctx.success("Done")
        assert json.loads(capsys.readouterr().out) == {"success": "Done"}


class TestOutputContextResult:
    """Tests for OutputContext.result method."""

    def test_result_prints_json_in_json_mode(self, capsys) -> None:
        ctx, _ = make_context(json_mode=True)
        ctx.result({"status": "ok"}, "Success message")
        assert json.loads(capsys.readouterr().out)["status"] == "ok"

    def test_result_prints_message_in_normal_mode(self) -> None:
        ctx, output = make_context()
        ctx.result({"status": "ok"}, "Success message")
        assert "Success message" in output.getvalue()


def test_global_context_round_trip() -> None:
    ctx, _ = make_context()
    set_output_context(ctx)
    try:
        assert get_output_context() is ctx
    finally:
        set_output_context(None)
