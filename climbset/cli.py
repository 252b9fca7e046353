"""
Command-line utility for inspecting drafts and route grades.

Usage Examples:
    Show the stored draft:
        python -m climbset.cli draft show

    Discard the stored draft:
        python -m climbset.cli draft clear

    Compute a display grade from a setter grade and climber grades:
        python -m climbset.cli grade --setter V4 --ascent V2 --ascent V2

Functions can also be imported and used programmatically:
    from climbset.cli import format_holds

    print(format_holds(editor.holds))
"""

import argparse
import sys
from typing import Optional, Sequence

from climbset.config import get_config_value, get_draft_directory, load_config
from climbset.constants import DRAFT_KEY
from climbset.drafts import JsonFileDraftStore
from climbset.exceptions import ClimbsetError
from climbset.grades import calculate_display_grade
from climbset.logging_config import configure_logging, get_logger
from climbset.models import Ascent, HoldSet

logger = get_logger(__name__)


def format_holds(holds: HoldSet) -> str:
    """Render a hold set as a fixed-width table.

    Args:
        holds: Hold set to render.

    Returns:
        Multi-line table, or a short message for an empty set.
    """
    if not holds:
        return "No holds."

    lines = [f"{'#':>3}  {'TYPE':<7} {'SIZE':<7} {'X%':>6} {'Y%':>6}  {'SEQ':>3}  ID"]
    for position, hold in enumerate(holds, start=1):
        sequence = "-" if hold.sequence is None else str(hold.sequence)
        lines.append(
            f"{position:>3}  {hold.type:<7} {hold.size:<7} "
            f"{hold.x:>6.2f} {hold.y:>6.2f}  {sequence:>3}  {hold.id}"
        )
    return "\n".join(lines)


def _draft_store() -> JsonFileDraftStore:
    return JsonFileDraftStore(
        get_draft_directory(), get_config_value("drafts.key", DRAFT_KEY)
    )


def _cmd_draft_show() -> int:
    holds = _draft_store().load()
    if holds is None:
        print("No draft stored.")
        return 0
    print(format_holds(holds))
    return 0


def _cmd_draft_clear() -> int:
    _draft_store().clear()
    print("Draft cleared.")
    return 0


def _cmd_grade(setter: Optional[str], ascent_grades: Sequence[str]) -> int:
    ascents = [Ascent(grade_v=grade) for grade in ascent_grades]
    grade = calculate_display_grade(setter, ascents)
    print(grade if grade is not None else "Ungraded")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the climbset CLI."""
    parser = argparse.ArgumentParser(
        prog="climbset",
        description="Inspect hold-editor drafts and compute display grades",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        help="Path to an alternative YAML configuration file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.required = True

    draft_parser = subparsers.add_parser("draft", help="Inspect or discard the draft")
    draft_parser.add_argument("action", choices=["show", "clear"])

    grade_parser = subparsers.add_parser("grade", help="Compute a display grade")
    grade_parser.add_argument("--setter", help="Setter grade, e.g. V4")
    grade_parser.add_argument(
        "--ascent",
        action="append",
        default=[],
        help="Climber-suggested grade; repeat for each ascent",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return a process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config, force_reload=True) if args.config else load_config()
        configure_logging(
            config["logging"]["level"], json_output=config["logging"]["json_output"]
        )

        if args.command == "draft":
            if args.action == "show":
                return _cmd_draft_show()
            return _cmd_draft_clear()
        return _cmd_grade(args.setter, args.ascent)
    except ClimbsetError as e:
        logger.error("Command failed: %s", e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
