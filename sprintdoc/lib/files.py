"""
Per-entity file generation.

Writes one file per Sprint, Story and Subtask:
  <prefix>sprint_<n>.md
  <prefix>story_<n>_<m>.md
  <prefix>subtask_<n>_<m>_<k>.md
Numbers are 1-based positions in the list handed to generate_all().
"""

import logging
from pathlib import Path

from sprintdoc.lib.templates import TemplateSet, render_sprint, render_story, render_subtask
from sprintdoc.plan.models import Sprint

logger = logging.getLogger(__name__)

FILE_EXTENSION = ".md"


def build_filename(kind: str, *numbers: int, prefix: str = "") -> str:
    """Build a file name like 'PRJ-story_1_2.md'."""
    numbers_str = "_".join(str(n) for n in numbers)
    return f"{prefix}{kind}_{numbers_str}{FILE_EXTENSION}"


class FileGenerator:
    """Renders sprints through templates and writes them to output_dir."""

    def __init__(self, output_dir: str | Path, templates: TemplateSet, file_prefix: str = ""):
        self.output_dir = Path(output_dir)
        self.templates = templates
        self.file_prefix = file_prefix or ""

    def _write(self, filename: str, content: str) -> Path:
        path = self.output_dir / filename
        path.write_text(content, encoding="utf-8")
        logger.debug(f"Wrote {path}")
        return path

    def generate_all(self, sprints: list[Sprint]) -> list[Path]:
        """Write files for every sprint, story and subtask.

        Returns:
            Written paths in write order (sprint, then each story followed
            by its subtasks).
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        total = len(sprints)
        written = []

        for sprint_number, sprint in enumerate(sprints, 1):
            written.append(self._write(
                build_filename("sprint", sprint_number, prefix=self.file_prefix),
                render_sprint(self.templates.sprint, sprint, sprint_number, total),
            ))

            for story_number, story in enumerate(sprint.stories, 1):
                written.append(self._write(
                    build_filename("story", sprint_number, story_number, prefix=self.file_prefix),
                    render_story(self.templates.story, story, sprint_number, story_number),
                ))

                for subtask_number, subtask in enumerate(story.subtasks, 1):
                    written.append(self._write(
                        build_filename(
                            "subtask", sprint_number, story_number, subtask_number,
                            prefix=self.file_prefix,
                        ),
                        render_subtask(
                            self.templates.subtask, subtask,
                            sprint_number, story_number, subtask_number,
                        ),
                    ))

        logger.info(f"Generated {len(written)} files in {self.output_dir}")
        return written
