"""
Convert a text course file (NUMBER,Name[,PREREQ...]) into a CSV or XLSX table.

Usage:
    python scripts/export_courses_table.py [--src PATH] [--out PATH]

Defaults:
    --src  data/courses.txt  (repo root)
    --out  data/courses.csv  (repo root); a .xlsx suffix writes a workbook
"""

import argparse
import os
import sys

import pandas as pd

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "backend"))

from data_loader import read_course_records

COLUMNS = ["course_number", "name", "prerequisites"]


def courses_to_frame(courses) -> pd.DataFrame:
    """One row per course; prerequisites joined with '; ' as the loader expects."""
    rows = [
        {
            "course_number": c.course_number,
            "name": c.name,
            "prerequisites": "; ".join(c.prerequisites),
        }
        for c in courses
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def export(src: str, out: str) -> int:
    if not os.path.isfile(src):
        print(f"[FATAL] Source file not found: {src}", file=sys.stderr)
        return 1

    df = courses_to_frame(read_course_records(src))
    out_dir = os.path.dirname(out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    if out.lower().endswith(".xlsx"):
        df.to_excel(out, sheet_name="courses", index=False, engine="openpyxl")
    else:
        df.to_csv(out, index=False)
    print(f"[OK]   {src} → {out}  ({len(df)} rows)")
    return 0


if __name__ == "__main__":
    repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    parser = argparse.ArgumentParser(description="Convert a text course file to a CSV/XLSX table.")
    parser.add_argument(
        "--src",
        default=os.path.join(repo_root, "data", "courses.txt"),
        help="Source text course file",
    )
    parser.add_argument(
        "--out",
        default=os.path.join(repo_root, "data", "courses.csv"),
        help="Output .csv or .xlsx path",
    )
    args = parser.parse_args()
    raise SystemExit(export(args.src, args.out))
