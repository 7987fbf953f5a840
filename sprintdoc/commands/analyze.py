"""
sprintdoc analyze - Show the Sprint/Story/Subtask structure of a document.
"""

import json

from sprintdoc.lib.config import GeneratorConfig
from sprintdoc.plan.reader import DocumentReadError, load_sprints
from sprintdoc.plan.summary import summarize_sprints


def cmd_analyze(args, config: GeneratorConfig) -> int:
    """Print the parsed structure as a table, or JSON with --json."""
    try:
        sprints = load_sprints(args.document)
    except DocumentReadError as e:
        print(f"ERROR: {e}")
        return 1

    summary = summarize_sprints(sprints)

    if args.json:
        print(json.dumps(summary, indent=2, ensure_ascii=False))
        return 0

    if not summary["sprints"]:
        print("No sprints found")
        print()
        print("Sprint titles must start with 'Sprint <n>.<n>'.")
        return 0

    print(f"Document: {args.document}")
    print("=" * 60)

    for sprint in summary["sprints"]:
        print()
        print(f"[{sprint['sprint_number']}] {sprint['title']}")
        print(f"    {sprint['story_count']} {'story' if sprint['story_count'] == 1 else 'stories'}")

        for story in sprint["stories"]:
            title_preview = story["title"][:50] + "..." if len(story["title"]) > 50 else story["title"]
            print(f"    {sprint['sprint_number']}.{story['story_number']:<4} {title_preview}")
            print(f"           subtasks: {story['subtask_count']:<4} content: {story['content_length']} chars")

    total_stories = sum(s["story_count"] for s in summary["sprints"])
    total_subtasks = sum(
        story["subtask_count"] for s in summary["sprints"] for story in s["stories"]
    )

    print()
    print("-" * 60)
    print(f"{summary['total_sprints']} sprints, {total_stories} stories, {total_subtasks} subtasks")

    return 0
