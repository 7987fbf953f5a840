"""
Plan hierarchy builder.

Reassembles the Sprint -> Story -> Subtask tree from the flat line
sequence extracted from a planning document.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from sprintdoc.plan.classify import classify_sprint, classify_story, classify_subtask
from sprintdoc.plan.models import Sprint, Story, Subtask

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split raw text into trimmed, non-empty lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def _joined(lines: list[str]) -> str:
    return '\n'.join(lines).strip()


@dataclass
class _ScanState:
    """Everything the builder tracks during one pass."""
    sprints: list[Sprint] = field(default_factory=list)
    sprint: Optional[Sprint] = None
    story: Optional[Story] = None
    subtask: Optional[Subtask] = None
    pending: list[str] = field(default_factory=list)

    def flush_pending(self) -> None:
        """Hand buffered lines to the deepest open entity and clear the buffer."""
        if self.subtask is not None:
            self.subtask.content += '\n' + _joined(self.pending)
        elif self.story is not None and self.pending:
            self.story.content = _joined(self.pending)
        self.pending = []

    def close_story(self) -> None:
        if self.story is not None and self.sprint is not None:
            self.sprint.stories.append(self.story)
        self.story = None
        self.subtask = None

    def close_sprint(self) -> None:
        if self.sprint is not None:
            self.sprints.append(self.sprint)
        self.sprint = None

    def open_sprint(self, title: str) -> None:
        self.flush_pending()
        self.close_story()
        self.close_sprint()
        self.sprint = Sprint(title=title)

    def open_story(self, title: str) -> None:
        self.flush_pending()
        self.close_story()
        self.story = Story(title=title)

    def open_subtask(self, line: str) -> None:
        if self.subtask is not None:
            self.subtask.content += '\n' + _joined(self.pending)
        elif self.pending:
            # First subtask: whatever preceded it is the story narrative
            self.story.content = _joined(self.pending)
        self.pending = []

        self.subtask = Subtask(content=line)
        self.story.subtasks.append(self.subtask)

    def finish(self) -> list[Sprint]:
        if self.subtask is not None and self.pending:
            self.subtask.content += '\n' + _joined(self.pending)
            self.pending = []

        if self.story is not None and self.sprint is not None:
            # Only stories that never opened a subtask take the trailing buffer
            if not self.story.content and self.pending:
                self.story.content = _joined(self.pending)
            self.sprint.stories.append(self.story)
        self.story = None
        self.subtask = None
        self.close_sprint()

        return self.sprints


def parse_sprints(lines: Iterable[str]) -> list[Sprint]:
    """Build the sprint hierarchy from an ordered sequence of lines.

    Title precedence is Sprint > Story > Subtask > plain content. A story
    title without an open sprint, or a subtask title without an open
    story, is treated as plain content. Content buffered before the first
    sprint has no owner and is dropped.

    Args:
        lines: Document lines in order. Blank lines are skipped.

    Returns:
        Sprints in document order, each with its stories and subtasks.
    """
    state = _ScanState()

    for line in lines:
        line = line.strip()
        if not line:
            continue

        sprint_match = classify_sprint(line)
        if sprint_match:
            state.open_sprint(line)
            continue

        story_match = classify_story(line)
        if story_match and state.sprint is not None:
            state.open_story(story_match.title)
            continue

        if classify_subtask(line) and state.story is not None:
            state.open_subtask(line)
            continue

        state.pending.append(line)

    sprints = state.finish()
    logger.debug(f"Parsed {len(sprints)} sprints")
    return sprints


def parse_text(text: str) -> list[Sprint]:
    """Split raw extracted text into lines and parse it."""
    return parse_sprints(split_lines(text))
