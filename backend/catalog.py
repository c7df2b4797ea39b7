from course_store import Course, CourseStore
from merge_sort import merge_sort
from prereq_graph import PrerequisiteGraph


class Catalog:
    """
    One loaded course catalog: store, prerequisite graph and the sorted listing.

    Load sequence: reset() -> ingest() per record in input order -> finalize().
    Queries before finalize() return empty results rather than raising.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.store = CourseStore()
        self.graph = PrerequisiteGraph()
        self._sorted: list[Course] = []

    def ingest(self, course: Course) -> None:
        self.store.insert(course)
        self.graph.add_course(course)

    def finalize(self, courses: list[Course]) -> list[Course]:
        self._sorted = merge_sort(courses)
        return list(self._sorted)

    def lookup(self, course_number: str) -> Course | None:
        return self.store.find(course_number)

    def available_after(self, course_number: str) -> list[str]:
        return self.graph.available_after(course_number)

    def prerequisites_of(self, course_number: str) -> list[str]:
        return self.graph.prerequisites_of(course_number)

    def sorted_all(self) -> list[Course]:
        return list(self._sorted)

    def is_empty(self) -> bool:
        return self.store.is_empty()


def build_catalog(courses: list[Course]) -> Catalog:
    """
    Build a fresh, finalized Catalog from records in input order.

    Callers holding a live catalog swap in the result only after this returns,
    so a failed read never leaves a half-built catalog visible.
    """
    catalog = Catalog()
    for course in courses:
        catalog.ingest(course)
    catalog.finalize(courses)
    return catalog
