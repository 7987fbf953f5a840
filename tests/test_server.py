"""Tests for the MCP server tools."""

import asyncio

from sprintdoc.lib.templates import DEFAULT_TEMPLATES_DIR
from sprintdoc.server import (
    SERVER_NAME,
    analyze_sprint_document,
    create_server,
    generate_sprint_files,
    process_single_sprint,
)


class TestAnalyzeSprintDocument:
    """Test analyze_sprint_document tool."""

    def test_returns_summary(self, sample_docx):
        result = analyze_sprint_document(str(sample_docx))

        assert result["success"] is True
        assert result["total_sprints"] == 2
        assert result["sprints"][1]["title"] == "Sprint 1.2 Relatórios"

    def test_missing_document_reports_error(self, tmp_path):
        result = analyze_sprint_document(str(tmp_path / "missing.docx"))

        assert result["success"] is False
        assert result["error"].startswith("Error analyzing document: Failed to read DOCX file")


class TestGenerateSprintFiles:
    """Test generate_sprint_files tool."""

    def test_generates_files(self, sample_docx, tmp_path):
        out_dir = tmp_path / "out"

        result = generate_sprint_files(str(sample_docx), str(out_dir), str(DEFAULT_TEMPLATES_DIR), "PRJ-")

        assert result["success"] is True
        assert result["generated_files_count"] == 8
        assert result["output_directory"] == str(out_dir)
        assert result["files"][0] == str(out_dir / "PRJ-sprint_1.md")

    def test_missing_templates_reports_error(self, sample_docx, tmp_path):
        result = generate_sprint_files(str(sample_docx), str(tmp_path / "out"), str(tmp_path / "nope"))

        assert result["success"] is False
        assert "Failed to load templates" in result["error"]


class TestProcessSingleSprint:
    """Test process_single_sprint tool."""

    def test_generates_one_sprint(self, sample_docx, tmp_path):
        out_dir = tmp_path / "out"

        result = process_single_sprint(str(sample_docx), 0, str(out_dir), str(DEFAULT_TEMPLATES_DIR))

        assert result["success"] is True
        assert result["sprint_number"] == 1
        assert result["sprint_title"] == "Sprint 1.1 Kickoff"
        assert result["generated_files_count"] == 5

    def test_out_of_range_reports_error(self, sample_docx, tmp_path):
        result = process_single_sprint(str(sample_docx), 3, str(tmp_path / "out"), str(DEFAULT_TEMPLATES_DIR))

        assert result["success"] is False
        assert result["error"] == "Error processing sprint: Invalid sprint index: 3. Valid range: 0-1"


class TestCreateServer:
    """Test tool registration."""

    def test_registers_tools(self):
        mcp = create_server()

        assert mcp.name == SERVER_NAME
        tools = asyncio.run(mcp.list_tools())
        assert sorted(t.name for t in tools) == [
            "analyze_sprint_document",
            "generate_sprint_files",
            "process_single_sprint",
        ]
