"""Tests for sprintdoc.plan.reader module."""

import docx
import pytest

from sprintdoc.plan.reader import (
    DocumentReadError,
    extract_lines,
    load_sprints,
    read_sprints_from_docx,
    read_sprints_from_text,
)


class TestExtractLines:
    """Test extract_lines function."""

    def test_paragraphs_trimmed_and_blank_dropped(self, make_docx):
        path = make_docx(["  Sprint 1.1  ", "", "   ", "User Story: A"])

        assert extract_lines(path) == ["Sprint 1.1", "User Story: A"]

    def test_soft_line_breaks_split_lines(self, tmp_path):
        document = docx.Document()
        paragraph = document.add_paragraph("Line one")
        paragraph.add_run().add_break()
        paragraph.add_run("Line two")
        path = tmp_path / "breaks.docx"
        document.save(str(path))

        assert extract_lines(path) == ["Line one", "Line two"]

    def test_table_cells_in_document_order(self, tmp_path):
        document = docx.Document()
        document.add_paragraph("before")
        table = document.add_table(rows=1, cols=2)
        table.cell(0, 0).text = "left cell"
        table.cell(0, 1).text = "right cell"
        document.add_paragraph("after")
        path = tmp_path / "table.docx"
        document.save(str(path))

        assert extract_lines(path) == ["before", "left cell", "right cell", "after"]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(DocumentReadError) as exc_info:
            extract_lines(tmp_path / "missing.docx")
        assert "Failed to read DOCX file" in str(exc_info.value)

    def test_corrupt_file_raises(self, tmp_path):
        path = tmp_path / "fake.docx"
        path.write_text("not a zip package")

        with pytest.raises(DocumentReadError) as exc_info:
            extract_lines(path)
        assert "Failed to read DOCX file" in str(exc_info.value)
        assert exc_info.value.__cause__ is not None


class TestReadSprints:
    """Test the document-level readers."""

    def test_read_sample_docx(self, sample_docx):
        sprints = read_sprints_from_docx(sample_docx)

        assert [s.title for s in sprints] == ["Sprint 1.1 Kickoff", "Sprint 1.2 Relatórios"]
        login, logout = sprints[0].stories
        assert login.title == "User Story: Login"
        assert login.content.startswith("Como um usuário, quero entrar no sistema")
        assert login.content.endswith("Então vejo o painel")
        assert [s.content for s in login.subtasks] == [
            "Tarefa 1.1.1 Design da tela\nWireframe aprovado",
            "Tarefa 1.1.2 Endpoint de login\n",
        ]
        assert logout.content == "Como um usuário, quero sair"
        assert logout.subtasks == []
        assert len(sprints[1].stories[0].subtasks) == 1

    def test_read_text_file(self, tmp_path):
        path = tmp_path / "plan.txt"
        path.write_text("Sprint 1.1\n\nUser Story: A\nbody\n", encoding="utf-8")

        sprints = read_sprints_from_text(path)

        assert sprints[0].stories[0].content == "body"

    def test_read_missing_text_file_raises(self, tmp_path):
        with pytest.raises(DocumentReadError):
            read_sprints_from_text(tmp_path / "missing.txt")

    def test_load_sprints_dispatches_on_suffix(self, sample_docx, tmp_path):
        text_path = tmp_path / "plan.md"
        text_path.write_text("Sprint 3.1\n", encoding="utf-8")

        assert len(load_sprints(sample_docx)) == 2
        assert [s.title for s in load_sprints(text_path)] == ["Sprint 3.1"]
