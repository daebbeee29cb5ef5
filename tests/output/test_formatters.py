"""Tests for result formatting — human and JSON modes."""

from __future__ import annotations

import json

from mintcompat.output.formatters import OutputSettings, format_result
from mintcompat.services.result import ServiceError, ServiceResult


def _ok() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="transform",
        data={"scanned": 3, "changed": 1, "files": ["guide/[draft].md"]},
    )


class TestHumanOutput:
    def test_ok_header_and_data(self) -> None:
        output = format_result(_ok())
        lines = output.splitlines()
        assert lines[0] == "OK: transform"
        assert "  scanned: 3" in lines
        assert "  files: 1" in lines
        assert "    - guide/[draft].md" in lines

    def test_quiet_prints_status_only(self) -> None:
        assert format_result(_ok(), settings=OutputSettings(quiet=True)) == "OK: transform"

    def test_error_with_detail(self) -> None:
        result = ServiceResult(
            ok=False,
            op="check",
            error=ServiceError(
                code="WOULD_CHANGE",
                message="1 of 3 files need rewriting",
                detail={"files": ["index.md"]},
            ),
        )
        output = format_result(result)
        assert output.splitlines()[0] == "ERROR: check - 1 of 3 files need rewriting"
        assert "    - index.md" in output

    def test_no_ansi_codes_when_not_a_tty(self) -> None:
        assert "\x1b[" not in format_result(_ok())

    def test_dict_values_as_compact_json(self) -> None:
        result = ServiceResult(ok=True, op="x", data={"meta": {"a": 1}})
        assert '  meta: {"a":1}' in format_result(result)


class TestJsonOutput:
    def test_json_dump(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "transform"
        assert data["data"]["files"] == ["guide/[draft].md"]
        assert data["error"] is None
