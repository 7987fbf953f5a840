"""
Plan document readers.

Extracts the raw line sequence from a .docx (or plain text) planning
document and hands it to the hierarchy builder.
"""

import logging
from pathlib import Path

import docx
from docx.table import Table
from docx.text.paragraph import Paragraph

from sprintdoc.plan.builder import parse_sprints, split_lines
from sprintdoc.plan.models import Sprint

logger = logging.getLogger(__name__)

DOCX_SUFFIX = ".docx"


class DocumentReadError(Exception):
    """Raised when a planning document cannot be read."""
    pass


def _table_text(table: Table) -> list[str]:
    """Text of every cell paragraph, row by row. Merged cells are read once."""
    texts = []
    seen = set()
    for row in table.rows:
        for cell in row.cells:
            if id(cell._tc) in seen:
                continue
            seen.add(id(cell._tc))
            texts.extend(p.text for p in cell.paragraphs)
    return texts


def extract_lines(filepath: str | Path) -> list[str]:
    """Extract trimmed, non-empty lines from a .docx file in document order.

    Paragraphs and table cells are both included. Soft line breaks inside a
    paragraph produce separate lines.

    Raises:
        DocumentReadError: if the file is missing or not a readable .docx
    """
    path = Path(filepath)

    try:
        document = docx.Document(str(path))
        texts = []
        for block in document.iter_inner_content():
            if isinstance(block, Paragraph):
                texts.append(block.text)
            elif isinstance(block, Table):
                texts.extend(_table_text(block))
    except Exception as e:
        raise DocumentReadError(f"Failed to read DOCX file: {e}") from e

    lines = split_lines('\n'.join(texts))
    logger.debug(f"Extracted {len(lines)} lines from {path}")
    return lines


def read_sprints_from_docx(filepath: str | Path) -> list[Sprint]:
    """Read a .docx planning document and return its sprints."""
    return parse_sprints(extract_lines(filepath))


def read_sprints_from_text(filepath: str | Path) -> list[Sprint]:
    """Read a plain text (.txt/.md) planning document and return its sprints."""
    path = Path(filepath)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(f"Failed to read text file: {e}") from e

    return parse_sprints(split_lines(text))


def load_sprints(filepath: str | Path) -> list[Sprint]:
    """Read sprints from a planning document, choosing the reader by suffix."""
    path = Path(filepath)
    if path.suffix.lower() == DOCX_SUFFIX:
        return read_sprints_from_docx(path)
    return read_sprints_from_text(path)
