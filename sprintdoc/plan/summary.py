"""
Structure summaries and sprint selection.
"""

from sprintdoc.lib.validate import validate
from sprintdoc.plan.models import Sprint


class SprintIndexError(Exception):
    """Raised when a sprint index is outside the parsed range."""

    def __init__(self, index: int, total: int):
        self.index = index
        self.total = total
        super().__init__(f"Invalid sprint index: {index}. Valid range: 0-{total - 1}")


def summarize_sprints(sprints: list[Sprint]) -> dict:
    """Summarize sprint/story counts and titles.

    Numbers in the summary are 1-based. The result is validated against
    the summary schema before it is returned.
    """
    summary = {
        "total_sprints": len(sprints),
        "sprints": [
            {
                "sprint_number": sprint_idx,
                "title": sprint.title,
                "description": sprint.description,
                "story_count": len(sprint.stories),
                "stories": [
                    {
                        "story_number": story_idx,
                        "title": story.title,
                        "content_length": len(story.content),
                        "subtask_count": len(story.subtasks),
                    }
                    for story_idx, story in enumerate(sprint.stories, 1)
                ],
            }
            for sprint_idx, sprint in enumerate(sprints, 1)
        ],
    }

    validate(summary, "summary")
    return summary


def select_sprint(sprints: list[Sprint], index: int) -> Sprint:
    """Return the sprint at a zero-based index.

    Raises:
        SprintIndexError: if index is negative or past the last sprint
    """
    if index < 0 or index >= len(sprints):
        raise SprintIndexError(index, len(sprints))
    return sprints[index]
