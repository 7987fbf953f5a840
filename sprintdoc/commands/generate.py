"""
sprintdoc generate / sprintdoc sprint - Write per-entity files.
"""

import logging
from pathlib import Path

from sprintdoc.lib.config import GeneratorConfig
from sprintdoc.lib.files import FileGenerator
from sprintdoc.lib.templates import TemplateError, load_templates
from sprintdoc.plan.models import Sprint
from sprintdoc.plan.reader import DocumentReadError, load_sprints
from sprintdoc.plan.summary import SprintIndexError, select_sprint

logger = logging.getLogger(__name__)


def _write_files(sprints: list[Sprint], config: GeneratorConfig) -> list[Path] | None:
    """Render sprints with the configured templates. Returns None on failure."""
    try:
        templates = load_templates(config.templates_dir)
    except TemplateError as e:
        print(f"ERROR: {e}")
        return None

    generator = FileGenerator(config.output_dir, templates, config.file_prefix)
    try:
        return generator.generate_all(sprints)
    except OSError as e:
        print(f"ERROR: Failed to write files: {e}")
        return None


def _print_files(files: list[Path], output_dir: Path) -> None:
    print(f"Generated {len(files)} {'file' if len(files) == 1 else 'files'} in {output_dir}")
    for path in files:
        print(f"  {path}")


def cmd_generate(args, config: GeneratorConfig) -> int:
    """Generate files for every sprint in the document."""
    try:
        sprints = load_sprints(args.document)
    except DocumentReadError as e:
        print(f"ERROR: {e}")
        return 1

    if not sprints:
        logger.warning(f"No sprints found in {args.document}")

    files = _write_files(sprints, config)
    if files is None:
        return 1

    _print_files(files, config.output_dir)
    return 0


def cmd_sprint(args, config: GeneratorConfig) -> int:
    """Generate files for a single sprint, selected by zero-based index.

    The selected sprint is written as sprint 1 of 1.
    """
    try:
        sprints = load_sprints(args.document)
    except DocumentReadError as e:
        print(f"ERROR: {e}")
        return 1

    try:
        sprint = select_sprint(sprints, args.index)
    except SprintIndexError as e:
        print(f"ERROR: {e}")
        return 2

    files = _write_files([sprint], config)
    if files is None:
        return 1

    print(f"Sprint {args.index + 1}: {sprint.title}")
    _print_files(files, config.output_dir)
    return 0
