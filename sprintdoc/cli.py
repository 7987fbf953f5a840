#!/usr/bin/env python3
"""sprintdoc CLI entrypoint."""

import sys
import argparse
import logging
from pathlib import Path

from sprintdoc.lib.config import GeneratorConfig, load_config
from sprintdoc.lib.validate import ValidationError
from sprintdoc.commands import analyze as cmd_analyze_module
from sprintdoc.commands import generate as cmd_generate_module

logger = logging.getLogger(__name__)


def setup_logging(level: str, verbose: bool = False) -> None:
    """Configure logging for the CLI. --verbose forces DEBUG."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def get_config(args) -> GeneratorConfig | None:
    """Load config from --config or ./sprintdoc.yaml, then apply CLI overrides."""
    try:
        config = load_config(Path(args.config) if args.config else None)
    except (FileNotFoundError, ValidationError) as e:
        print(f"ERROR: {e}")
        return None

    if getattr(args, 'output_dir', None):
        config.output_dir = Path(args.output_dir)
    if getattr(args, 'templates_dir', None):
        config.templates_dir = Path(args.templates_dir)
    if getattr(args, 'prefix', None) is not None:
        config.file_prefix = args.prefix

    return config


def cmd_analyze(args, config: GeneratorConfig):
    return cmd_analyze_module.cmd_analyze(args, config)


def cmd_generate(args, config: GeneratorConfig):
    return cmd_generate_module.cmd_generate(args, config)


def cmd_sprint(args, config: GeneratorConfig):
    return cmd_generate_module.cmd_sprint(args, config)


def cmd_serve(args, config: GeneratorConfig):
    from sprintdoc.server import serve

    level = logging.DEBUG if args.verbose else getattr(logging, config.log_level, logging.WARNING)
    serve(level)
    return 0


def _add_output_args(parser):
    parser.add_argument('--output-dir', '-o', help='Directory for generated files')
    parser.add_argument('--templates-dir', '-t', help='Directory with sprint.md, story.md, subtask.md')
    parser.add_argument('--prefix', help='Prefix for generated file names')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sprintdoc',
        description='Split a Sprint planning document into per-item files',
    )
    parser.add_argument('--config', '-c', help='Path to sprintdoc.yaml')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # sprintdoc analyze
    p_analyze = subparsers.add_parser('analyze', help='Show Sprint/Story/Subtask structure')
    p_analyze.add_argument('document', help='Planning document (.docx, or plain text)')
    p_analyze.add_argument('--json', action='store_true', help='Print the summary as JSON')
    p_analyze.set_defaults(func=cmd_analyze)

    # sprintdoc generate
    p_generate = subparsers.add_parser('generate', help='Generate files for every sprint')
    p_generate.add_argument('document', help='Planning document (.docx, or plain text)')
    _add_output_args(p_generate)
    p_generate.set_defaults(func=cmd_generate)

    # sprintdoc sprint
    p_sprint = subparsers.add_parser('sprint', help='Generate files for a single sprint')
    p_sprint.add_argument('document', help='Planning document (.docx, or plain text)')
    p_sprint.add_argument('index', type=int, help='Zero-based sprint index (0 for first sprint)')
    _add_output_args(p_sprint)
    p_sprint.set_defaults(func=cmd_sprint)

    # sprintdoc serve
    p_serve = subparsers.add_parser('serve', help='Run the MCP server on stdio')
    p_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_config(args)
    if config is None:
        return 2

    if args.command != 'serve':
        setup_logging(config.log_level, args.verbose)

    return args.func(args, config)


if __name__ == '__main__':
    sys.exit(main())
