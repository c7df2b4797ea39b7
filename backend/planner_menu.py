"""
Interactive course planner menu.

Usage:
    python backend/planner_menu.py [--data PATH]

Defaults:
    --data  $DATA_PATH, else data/courses.txt (repo root)
"""

import argparse
import os
import sys

# Ensure backend/ is on sys.path so sibling imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from catalog import Catalog
from course_printer import format_course, format_course_list
from data_loader import load_data, resolve_data_path
from normalizer import normalize_code

MENU_LINES = [
    "\t1. Load Data Structure.",
    "\t2. Print Course List.",
    "\t3. Print Course.",
    "\t4. Print Courses Unlocked By A Course.",
    "\t9. Exit",
]
EXIT_OPTION = "9"
NOT_LOADED_MESSAGE = "Please load courses first."


class PlannerSession:
    """Holds the loaded catalog for one menu run. Loads swap it in whole or not at all."""

    def __init__(self, data_path: str, read=input, output=print):
        self.data_path = data_path
        self.catalog: Catalog | None = None
        self._read = read
        self._out = output

    def load(self) -> bool:
        try:
            new_catalog = load_data(self.data_path)
        except FileNotFoundError:
            self._out("Could not access courses file. Please check if loaded properly.")
            return False
        except ValueError as exc:
            self._out(str(exc))
            return False

        self.catalog = new_catalog
        self._out(f"Data successfully loaded. ({new_catalog.store.size()} courses)")
        return True

    def print_course_list(self) -> None:
        courses = self.catalog.sorted_all() if self.catalog else []
        self._out(format_course_list(courses))

    def _ask_course(self, prompt: str) -> str | None:
        if self.catalog is None:
            self._out(NOT_LOADED_MESSAGE)
            return None
        code = normalize_code(self._read(prompt))
        if code is None:
            self._out("No course number entered.")
        return code

    def print_course(self) -> None:
        code = self._ask_course("What course do you want to know about? ")
        if code is None:
            return
        found = self.catalog.lookup(code)
        if found is None:
            self._out(f"Course {code} not found.")
            return
        self._out(format_course(found))

    def print_unlocks(self) -> None:
        code = self._ask_course("Which course did you complete? ")
        if code is None:
            return
        unlocked = self.catalog.available_after(code)
        if not unlocked:
            self._out(f"No courses become available after completing {code}.")
            return
        self._out(f"Completing {code} makes these courses available:")
        for key in unlocked:
            course = self.catalog.lookup(key)
            self._out(f"  {course.course_number}, {course.name}" if course else f"  {key}")

    def handle(self, choice: str) -> bool:
        """Run one menu choice. Returns False when the user asked to exit."""
        if choice == EXIT_OPTION:
            return False
        if choice == "1":
            self.load()
        elif choice == "2":
            self.print_course_list()
        elif choice == "3":
            self.print_course()
        elif choice == "4":
            self.print_unlocks()
        else:
            self._out(f"{choice} is not a valid option.")
        return True


def run_menu(data_path: str, read=input, output=print) -> int:
    session = PlannerSession(data_path, read=read, output=output)
    output("Welcome to the course planner.")

    while True:
        output("")
        for line in MENU_LINES:
            output(line)
        try:
            choice = read("What would you like to do? ").strip()
            if not session.handle(choice):
                break
        except EOFError:
            break

    output("Thank you for using the course planner!")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Browse a course catalog from the terminal.")
    parser.add_argument(
        "--data",
        default=os.environ.get("DATA_PATH"),
        help="Course file (.txt, .csv or .xlsx)",
    )
    args = parser.parse_args(argv)
    return run_menu(resolve_data_path(args.data))


if __name__ == "__main__":
    raise SystemExit(main())
