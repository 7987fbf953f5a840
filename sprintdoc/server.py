"""
Stdio MCP server for sprintdoc.

Exposes the planning-document tools to MCP clients:
1. analyze_sprint_document - structure summary
2. generate_sprint_files - files for every sprint
3. process_single_sprint - files for one sprint by index

Tool failures are returned as {"success": False, "error": ...} so a bad
document never takes the server down. Logging goes to stderr; stdout is
reserved for the protocol.
"""

import logging
import sys
from typing import Any

from mcp.server.fastmcp import FastMCP

from sprintdoc.lib.files import FileGenerator
from sprintdoc.lib.templates import TemplateError, load_templates
from sprintdoc.plan.reader import DocumentReadError, read_sprints_from_docx
from sprintdoc.plan.summary import SprintIndexError, select_sprint, summarize_sprints

logger = logging.getLogger(__name__)

SERVER_NAME = "sprint-docx-processor"


def _failure(context: str, error: Exception) -> dict[str, Any]:
    logger.error(f"{context}: {error}")
    return {"success": False, "error": f"{context}: {error}"}


def analyze_sprint_document(docx_path: str) -> dict[str, Any]:
    """
    Analyze a DOCX Sprint document and return its hierarchical structure
    (Sprints -> Stories -> Subtasks).

    Args:
        docx_path: Absolute path to the DOCX file containing Sprint data
    """
    try:
        sprints = read_sprints_from_docx(docx_path)
    except DocumentReadError as e:
        return _failure("Error analyzing document", e)

    return {"success": True, **summarize_sprints(sprints)}


def generate_sprint_files(
    docx_path: str,
    output_dir: str,
    templates_dir: str,
    file_prefix: str | None = None,
) -> dict[str, Any]:
    """
    Generate individual markdown files for each Sprint, Story, and Subtask
    from a DOCX document.

    Args:
        docx_path: Absolute path to the DOCX file containing Sprint data
        output_dir: Directory where markdown files will be generated
        templates_dir: Directory containing sprint.md, story.md, and subtask.md
        file_prefix: Optional prefix for generated filenames
    """
    try:
        sprints = read_sprints_from_docx(docx_path)
        templates = load_templates(templates_dir)
        files = FileGenerator(output_dir, templates, file_prefix or "").generate_all(sprints)
    except (DocumentReadError, TemplateError, OSError) as e:
        return _failure("Error generating files", e)

    return {
        "success": True,
        "generated_files_count": len(files),
        "output_directory": output_dir,
        "files": [str(p) for p in files],
    }


def process_single_sprint(
    docx_path: str,
    sprint_index: int,
    output_dir: str,
    templates_dir: str,
    file_prefix: str | None = None,
) -> dict[str, Any]:
    """
    Process and generate markdown files for a single Sprint (and its
    Stories/Subtasks) by index.

    Args:
        docx_path: Absolute path to the DOCX file containing Sprint data
        sprint_index: Zero-based index of the Sprint to process (0 for first Sprint)
        output_dir: Directory where markdown files will be generated
        templates_dir: Directory containing sprint.md, story.md, and subtask.md
        file_prefix: Optional prefix for generated filenames
    """
    try:
        sprints = read_sprints_from_docx(docx_path)
        sprint = select_sprint(sprints, sprint_index)
        templates = load_templates(templates_dir)
        files = FileGenerator(output_dir, templates, file_prefix or "").generate_all([sprint])
    except (DocumentReadError, SprintIndexError, TemplateError, OSError) as e:
        return _failure("Error processing sprint", e)

    return {
        "success": True,
        "sprint_number": sprint_index + 1,
        "sprint_title": sprint.title,
        "generated_files_count": len(files),
        "output_directory": output_dir,
        "files": [str(p) for p in files],
    }


def create_server() -> FastMCP:
    """Create the MCP server with all sprintdoc tools registered."""
    mcp = FastMCP(SERVER_NAME)
    mcp.tool()(analyze_sprint_document)
    mcp.tool()(generate_sprint_files)
    mcp.tool()(process_single_sprint)
    return mcp


def serve(log_level: int = logging.WARNING) -> None:
    """Run the MCP server on stdio."""
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logger.info(f"{SERVER_NAME} running on stdio")
    create_server().run(transport="stdio")
