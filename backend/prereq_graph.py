from collections import deque

from course_store import Course, course_key


class PrerequisiteGraph:
    """
    Prerequisite edges kept in two directions, both keyed by lowercased course number.

      forward: {"csci300": ["csci200", "math201"], "csci100": [], ...}
      reverse: {"csci200": ["csci300"], "math201": ["csci300"], ...}

    Every added course gets a forward entry (possibly empty). Reverse entries only
    exist for codes that somebody lists as a prerequisite, which includes dangling
    codes that were never added themselves.
    """

    def __init__(self):
        self.forward: dict[str, list[str]] = {}
        self.reverse: dict[str, list[str]] = {}

    def add_course(self, course: Course) -> None:
        """
        Register a course and its prerequisite edges.

        Re-adding the same course replaces its forward list but appends to the
        reverse lists again, so a reload must start from a fresh graph.
        """
        key = course_key(course.course_number)
        self.forward[key] = []
        for prereq in course.prerequisites:
            prereq_key = course_key(prereq)
            self.forward[key].append(prereq_key)
            self.reverse.setdefault(prereq_key, []).append(key)

    def prerequisites_of(self, course_number: str) -> list[str]:
        return list(self.forward.get(course_key(course_number), []))

    def dependents_of(self, course_number: str) -> list[str]:
        """Courses that directly list `course_number` as a prerequisite."""
        return list(self.reverse.get(course_key(course_number), []))

    def available_after(self, completed: str) -> list[str]:
        """
        Courses unlocked by completing `completed`, in BFS order.

        A candidate counts as available only when every prerequisite it lists is
        the completed course itself, i.e. it has that one prerequisite (possibly
        repeated). An available course's own dependents are queued next and
        checked against the same completed course; dependents of an unavailable
        course are not expanded.

          CSCI101 -> CSCI200              single prereq, reported after CSCI101
          CSCI200 + MATH201 -> CSCI300    two prereqs, never reported

        Completion history is not tracked across calls.
        """
        completed_key = course_key(completed)
        if completed_key not in self.reverse:
            return []

        available: list[str] = []
        visited: set[str] = set()
        queue = deque(self.reverse[completed_key])

        while queue:
            current = queue.popleft()
            if current in visited:
                continue
            visited.add(current)

            prereqs = self.forward.get(current, [])
            if any(p != completed_key for p in prereqs):
                continue

            available.append(current)
            for nxt in self.reverse.get(current, []):
                if nxt not in visited:
                    queue.append(nxt)

        return available
