"""
Plan module for sprintdoc.

Parses planning documents into Sprint -> Story -> Subtask hierarchies.
"""

from sprintdoc.plan.models import Sprint, Story, Subtask
from sprintdoc.plan.classify import (
    TitleMatch,
    classify_sprint,
    classify_story,
    classify_subtask,
)
from sprintdoc.plan.builder import parse_sprints, parse_text, split_lines
from sprintdoc.plan.reader import (
    DocumentReadError,
    extract_lines,
    load_sprints,
    read_sprints_from_docx,
    read_sprints_from_text,
)
from sprintdoc.plan.summary import SprintIndexError, select_sprint, summarize_sprints

__all__ = [
    "Sprint",
    "Story",
    "Subtask",
    "TitleMatch",
    "classify_sprint",
    "classify_story",
    "classify_subtask",
    "parse_sprints",
    "parse_text",
    "split_lines",
    "DocumentReadError",
    "extract_lines",
    "load_sprints",
    "read_sprints_from_docx",
    "read_sprints_from_text",
    "SprintIndexError",
    "select_sprint",
    "summarize_sprints",
]
