"""
Title classification for plan documents.

Each function looks at a single trimmed line and decides whether it opens
a new Sprint, Story or Subtask. Sprint and subtask titles are anchored
numeric patterns; story titles are a loose keyword search anywhere in
the line.
"""

import re
from dataclasses import dataclass
from typing import Optional

SPRINT_RE = re.compile(r'^Sprint\s+(\d+\.\d+)', re.IGNORECASE)
SUBTASK_RE = re.compile(r'^Tarefa\s+(\d+\.\d+\.\d+)', re.IGNORECASE)

STORY_KEYWORDS = ('user story', 'história de usuário', 'story')


@dataclass(frozen=True)
class TitleMatch:
    """Positive classification result.

    number is the level identifier ("1.1", "1.1.1") for sprints and
    subtasks, None for stories.
    """
    title: str
    number: Optional[str] = None


def classify_sprint(line: str) -> Optional[TitleMatch]:
    """Return a match if line opens a sprint (e.g. "Sprint 1.1 Kickoff")."""
    match = SPRINT_RE.match(line)
    if match:
        return TitleMatch(title=line, number=match.group(1))
    return None


def classify_story(line: str) -> Optional[TitleMatch]:
    """Return a match if any story keyword appears in line."""
    lowered = line.lower()
    if any(keyword in lowered for keyword in STORY_KEYWORDS):
        return TitleMatch(title=line.strip())
    return None


def classify_subtask(line: str) -> Optional[TitleMatch]:
    """Return a match if line opens a subtask (e.g. "Tarefa 1.1.1 Design")."""
    match = SUBTASK_RE.match(line)
    if match:
        return TitleMatch(title=line, number=match.group(1))
    return None
