"""
Data models for the plan hierarchy.
"""

from dataclasses import dataclass, field


@dataclass
class Subtask:
    """Smallest unit of work. Content starts with its own title line."""
    content: str


@dataclass
class Story:
    """A unit of work within a Sprint.

    Content holds the narrative text between the story title and its
    first subtask (or the next story/sprint when it has no subtasks).
    """
    title: str
    content: str = ""
    subtasks: list[Subtask] = field(default_factory=list)


@dataclass
class Sprint:
    """Top-level planning period."""
    title: str
    description: str = ""                      # Reserved, never populated by the parser
    stories: list[Story] = field(default_factory=list)
