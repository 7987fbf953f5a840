"""
Template loader for sprintdoc.

Loads sprint.md, story.md and subtask.md from a templates directory and
fills in their placeholders. Placeholders are literal tokens such as
{story_title}; every occurrence is replaced and there is no brace
escaping, so content may contain braces freely.

Story content goes through a fixed Jira wiki markup pass before it is
substituted (see format_story_content).
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from sprintdoc.plan.models import Sprint, Story, Subtask

logger = logging.getLogger(__name__)

__all__ = [
    "TemplateError",
    "TemplateSet",
    "load_templates",
    "render_sprint",
    "render_story",
    "render_subtask",
    "format_story_content",
    "DEFAULT_TEMPLATES_DIR",
    "TEMPLATE_FILES",
]

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

TEMPLATE_FILES = {
    "sprint": "sprint.md",
    "story": "story.md",
    "subtask": "subtask.md",
}

# Applied in order to the whole story content, one line at a time (re.M)
_STORY_MARKUP = [
    (re.compile(r'^(Como uma?.*?)$', re.M), r'*\1*\n'),
    (re.compile(r'^(Critérios de Aceite.*?)$', re.M), r'\nh3. \1\n'),
    (re.compile(r'^(Cenário \d+:.*?)$', re.M), r'\n*\1*'),
    (re.compile(r'^(Dado que.*?)$', re.M), r'* {color:#00875a}✓{color} \1'),
    (re.compile(r'^(Quando.*?)$', re.M), r'* {color:#0052cc}→{color} \1'),
    (re.compile(r'^(Então.*?)$', re.M), r'* {color:#6554c0}✓{color} \1'),
    (re.compile(r'^(Sub-Tarefas.*?)$', re.M), r'\n----\n\nh3. \1\n'),
]


class TemplateError(Exception):
    """Raised when templates cannot be loaded."""
    pass


@dataclass
class TemplateSet:
    """The three entity templates."""
    sprint: str
    story: str
    subtask: str


def load_templates(templates_dir: str | Path | None = None) -> TemplateSet:
    """
    Load sprint.md, story.md and subtask.md from a directory.

    Args:
        templates_dir: Directory holding the templates. None uses the
            templates bundled with sprintdoc.

    Returns:
        TemplateSet with raw template text

    Raises:
        TemplateError: If any template is missing or unreadable
    """
    directory = Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR
    logger.debug(f"Loading templates from {directory}")

    loaded = {}
    try:
        for kind, filename in TEMPLATE_FILES.items():
            loaded[kind] = (directory / filename).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateError(f"Failed to load templates: {e}") from e

    return TemplateSet(**loaded)


def _substitute(template: str, values: dict[str, str]) -> str:
    for name, value in values.items():
        template = template.replace("{" + name + "}", value)
    return template


def format_story_content(content: str) -> str:
    """
    Apply Jira wiki markup to story content.

    Recognizes the user story opening ("Como um/uma ..."), the acceptance
    criteria header, scenario headers and Given/When/Then lines
    (Dado que / Quando / Então), plus the "Sub-Tarefas" section.
    """
    formatted = content
    for pattern, replacement in _STORY_MARKUP:
        formatted = pattern.sub(replacement, formatted)
    return formatted.strip()


def render_sprint(template: str, sprint: Sprint, sprint_number: int, total_sprints: int) -> str:
    return _substitute(template, {
        "sprint_title": sprint.title,
        "sprint_number": str(sprint_number),
        "total_sprints": str(total_sprints),
        "sprint_description": sprint.description,
        "story_count": str(len(sprint.stories)),
    })


def render_story(template: str, story: Story, sprint_number: int, story_number: int) -> str:
    return _substitute(template, {
        "story_title": story.title,
        "sprint_number": str(sprint_number),
        "story_number": str(story_number),
        "story_content": format_story_content(story.content),
        "subtask_count": str(len(story.subtasks)),
    })


def render_subtask(
    template: str,
    subtask: Subtask,
    sprint_number: int,
    story_number: int,
    subtask_number: int,
) -> str:
    return _substitute(template, {
        "subtask_content": subtask.content,
        "sprint_number": str(sprint_number),
        "story_number": str(story_number),
        "subtask_number": str(subtask_number),
    })
