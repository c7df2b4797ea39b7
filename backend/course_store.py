from dataclasses import dataclass, field


@dataclass(frozen=True)
class Course:
    course_number: str
    name: str
    prerequisites: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Freeze list input so a stored record can't be mutated from outside.
        if not isinstance(self.prerequisites, tuple):
            object.__setattr__(self, "prerequisites", tuple(self.prerequisites))

    def to_dict(self) -> dict:
        return {
            "course_number": self.course_number,
            "name": self.name,
            "prerequisites": list(self.prerequisites),
        }


def course_key(course_number: str) -> str:
    """Lowercased lookup key. The only normalization applied to identifiers."""
    return str(course_number or "").lower()


class CourseStore:
    """
    Case-insensitive index: course number -> Course.

    Keys are folded with course_key(); the stored Course keeps its original
    casing for display. Inserting an existing key replaces the old record.
    """

    def __init__(self):
        self._courses: dict[str, Course] = {}

    def insert(self, course: Course) -> None:
        self._courses[course_key(course.course_number)] = course

    def find(self, course_number: str) -> Course | None:
        return self._courses.get(course_key(course_number))

    def all_courses(self) -> list[Course]:
        return list(self._courses.values())

    def is_empty(self) -> bool:
        return not self._courses

    def size(self) -> int:
        return len(self._courses)

    def __len__(self) -> int:
        return len(self._courses)

    def __contains__(self, course_number) -> bool:
        return course_key(course_number) in self._courses
