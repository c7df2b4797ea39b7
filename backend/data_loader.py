import os

import pandas as pd

from catalog import Catalog, build_catalog
from course_store import Course, course_key
from normalizer import normalize_code, split_codes

# A line holding only this marker ends a text course file early.
END_OF_INPUT = "-1"

TABLE_EXTENSIONS = {".csv", ".xlsx", ".xls"}
REQUIRED_COLUMNS = ["course_number", "name"]

BACKEND_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(BACKEND_DIR)
DEFAULT_DATA_PATH = os.path.join(PROJECT_ROOT, "data", "courses.txt")


def resolve_data_path(raw: str | None = None) -> str:
    """DATA_PATH-style value -> absolute path. Relative paths hang off the project root."""
    if not raw:
        return DEFAULT_DATA_PATH
    if not os.path.isabs(raw):
        return os.path.join(PROJECT_ROOT, raw)
    return raw


def parse_course_line(line: str, line_no: int | None = None) -> Course:
    """
    Parse one 'NUMBER,Name[,PREREQ...]' line.

    Fields are trimmed and empty prerequisite fields (trailing commas) dropped.
    Raises ValueError when the number or name is missing.
    """
    fields = [f.strip() for f in line.split(",")]
    if len(fields) < 2 or not fields[0] or not fields[1]:
        where = f"line {line_no}" if line_no is not None else "line"
        raise ValueError(f"Malformed course {where}: {line.strip()!r}")
    prereqs = tuple(f for f in fields[2:] if f)
    return Course(fields[0], fields[1], prereqs)


def _read_text_records(path: str) -> list[Course]:
    courses: list[Course] = []
    with open(path, encoding="utf-8") as fh:
        for line_no, line in enumerate(fh, start=1):
            stripped = line.strip()
            if stripped == END_OF_INPUT:
                break
            if not stripped:
                continue
            courses.append(parse_course_line(stripped, line_no))
    return courses


def _read_table_records(path: str) -> list[Course]:
    """Read a CSV/XLSX course table with course_number, name[, prerequisites] columns."""
    if path.lower().endswith(".csv"):
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    else:
        df = pd.read_excel(path, dtype=str)

    df.columns = [str(c).strip().lower() for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Course table {path} is missing column(s): {missing}")
    if "prerequisites" not in df.columns:
        df["prerequisites"] = ""
    df = df.fillna("")

    courses: list[Course] = []
    for idx, row in df.iterrows():
        number = normalize_code(row["course_number"])
        name = normalize_code(row["name"])
        if not number and not name:
            continue
        if not number or not name:
            # +2: header row plus 1-based numbering
            raise ValueError(
                f"Malformed course row {idx + 2} in {path}: course_number and name are required"
            )
        courses.append(Course(number, name, tuple(split_codes(row["prerequisites"]))))
    return courses


def read_course_records(path: str) -> list[Course]:
    """Read course records in file order. Raises on missing file or malformed rows."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Could not access courses file: {path}")
    ext = os.path.splitext(path)[1].lower()
    if ext in TABLE_EXTENSIONS:
        return _read_table_records(path)
    return _read_text_records(path)


def _report_integrity(courses: list[Course]) -> None:
    seen: set[str] = set()
    duplicates: list[str] = []
    for course in courses:
        key = course_key(course.course_number)
        if key in seen and key not in duplicates:
            duplicates.append(key)
        seen.add(key)
    if duplicates:
        print(f"[WARN] {len(duplicates)} course number(s) listed more than once; last entry wins: {duplicates}")

    dangling = sorted({
        course_key(p)
        for course in courses
        for p in course.prerequisites
        if course_key(p) not in seen
    })
    if dangling:
        print(f"[INFO] {len(dangling)} prerequisite(s) have no course record: {dangling}")


def load_data(path: str) -> Catalog:
    """
    Load a course file into a new Catalog. Raises on file/format errors.

    Nothing is mutated on failure, so callers can keep serving their previous
    catalog when this raises.
    """
    courses = read_course_records(path)
    if not courses:
        raise ValueError("Courses file appears to be empty.")
    _report_integrity(courses)
    return build_catalog(courses)
