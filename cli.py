#!/usr/bin/env python3
"""
Student Streams Queries - Command Line Interface

Loads the sample student dataset and runs the student queries, either all
at once (batch mode) or one at a time from a menu (interactive mode).
"""

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, Sequence
from config import LOG_LEVEL, QUERY_WORKERS, setup_logging
from database import Student, get_all_students
from queries import StudentQueries, QueryFormatter, QUERIES
from workers import QueryWorkerPool

logger = logging.getLogger(__name__)


def run_all_queries(students: Sequence[Student], query_keys: Optional[List[str]] = None,
                    parallel: bool = False, num_workers: int = QUERY_WORKERS) -> Dict[str, object]:
    """
    Run the student queries against a collection.

    Args:
        students: Student collection
        query_keys: Subset of query keys to run (default: all, in fixed order)
        parallel: Run the queries on a thread pool instead of one after another
        num_workers: Thread pool size when parallel

    Returns:
        Query key to result, in the fixed query order
    """
    students = StudentQueries.validate_students(students)
    selected = {key: func for key, func in QUERIES.items()
                if query_keys is None or key in query_keys}

    if parallel:
        logger.info(f"Running {len(selected)} queries on {num_workers} workers")
        return QueryWorkerPool(selected, students, num_workers=num_workers).run()

    logger.info(f"Running {len(selected)} queries sequentially")
    return {key: func(students) for key, func in selected.items()}


class MenuItem:
    """Represents a single menu item."""

    def __init__(self, key: str, label: str, action: Callable):
        self.key = key
        self.label = label
        self.action = action

    def display(self) -> str:
        """Return formatted menu item for display."""
        return f"  {self.key}. {self.label}"


class MenuSystem:
    """Handles menu display and navigation."""

    def __init__(self, title: str, input_func: Callable[[str], str] = input):
        self.title = title
        self.items: List[MenuItem] = []
        self.input_func = input_func
        self.running = True

    def add_item(self, key: str, label: str, action: Callable):
        """Add a menu item."""
        self.items.append(MenuItem(key, label, action))

    def display(self):
        """Display the menu."""
        print("\n" + "=" * 80)
        print(self.title)
        print("=" * 80)
        print()

        for item in self.items:
            print(item.display())

        print("\n  0. Exit")
        print("=" * 80)

    def get_choice(self) -> str:
        """Get user's menu choice."""
        while True:
            choice = self.input_func("\nEnter your choice: ").strip()
            if choice == "0":
                return "0"

            if any(item.key == choice for item in self.items):
                return choice

            print("✗ Invalid choice. Please try again.")

    def run(self):
        """Run the menu loop."""
        while self.running:
            self.display()
            try:
                choice = self.get_choice()
            except EOFError:
                choice = "0"

            if choice == "0":
                self.running = False
                print("\nGoodbye!")
                break

            for item in self.items:
                if item.key == choice:
                    print("\n" + "=" * 80)
                    item.action()
                    print("=" * 80)
                    break


def build_menu(students: Sequence[Student],
               input_func: Callable[[str], str] = input) -> MenuSystem:
    """Build the interactive menu with one item per query."""
    menu = MenuSystem("Student Streams Queries", input_func=input_func)

    def make_action(key: str, func: Callable) -> Callable:
        def action():
            print(QueryFormatter.format_query_line(key, func(students)))
        return action

    for idx, (key, func) in enumerate(QUERIES.items(), 1):
        menu.add_item(str(idx), QueryFormatter.label_for(key), make_action(key, func))

    return menu


LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1 (got {number})")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run student queries over the sample dataset.")

    parser.add_argument("-q", "--query", action="append", choices=list(QUERIES),
                        help="Query to run (repeatable, default: all)")
    parser.add_argument("-p", "--parallel", action="store_true",
                        help="Run the queries concurrently")
    parser.add_argument("-w", "--workers", type=positive_int, default=QUERY_WORKERS,
                        help=f"Number of workers for --parallel (default {QUERY_WORKERS})")
    parser.add_argument("-l", "--log-level", type=str.upper, choices=LOG_LEVELS,
                        default=LOG_LEVEL.upper(),
                        help=f"Logging level (default {LOG_LEVEL})")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="Pick queries from a menu")

    args = parser.parse_args(argv)

    # Defaults come from the environment and skip argparse's own checks
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid LOG_LEVEL '{args.log_level}' (choose from {', '.join(LOG_LEVELS)})")
    if args.workers < 1:
        parser.error(f"invalid QUERY_WORKERS {args.workers} (must be at least 1)")

    return args


def main(argv: Optional[List[str]] = None,
         students: Optional[Sequence[Student]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    if students is None:
        students = get_all_students()

    try:
        students = StudentQueries.validate_students(students)
        logger.info(f"Loaded {len(students)} students")

        duplicates = StudentQueries.duplicate_names(students)
        if duplicates:
            logger.warning(f"Duplicate student names, name-keyed results keep the last one: "
                           f"{', '.join(duplicates)}")

        if args.interactive:
            build_menu(students).run()
            return 0

        results = run_all_queries(students, query_keys=args.query,
                                  parallel=args.parallel, num_workers=args.workers)
    except (ValueError, TypeError) as e:
        logger.error(f"Invalid input: {str(e)}")
        return 1

    print(QueryFormatter.format_report(results))
    return 0


if __name__ == '__main__':
    sys.exit(main())
