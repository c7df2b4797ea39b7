import sys
import os

import pytest

# Add backend/ to path so tests can import backend modules directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))

# Add scripts/ to path so tests can import script modules directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "scripts"))

DATASET_PATH = os.path.join(os.path.dirname(__file__), "..", "data", "courses.txt")


@pytest.fixture
def dataset_path():
    return os.path.abspath(DATASET_PATH)


@pytest.fixture
def dataset_courses():
    """The seven-course sample catalog, in file order."""
    from course_store import Course

    return [
        Course("CSCI300", "Introduction to Algorithms", ("CSCI200", "MATH201")),
        Course("CSCI350", "Operating Systems", ("CSCI300",)),
        Course("CSCI101", "Introduction to Programming in C++", ("CSCI100",)),
        Course("CSCI100", "Introduction to Computer Science"),
        Course("CSCI400", "Large Software Development", ("CSCI301", "CSCI350")),
        Course("CSCI301", "Advanced Programming in C++", ("CSCI101",)),
        Course("CSCI200", "Data Structures", ("CSCI101",)),
    ]
