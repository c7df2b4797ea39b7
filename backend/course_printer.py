from course_store import Course

NO_COURSES_MESSAGE = "No courses loaded. Please load data first."


def format_course(course: Course) -> str:
    """
    Two-line summary of one course:

      CSCI300, Introduction to Algorithms
      Prerequisites: CSCI200, MATH201
    """
    header = f"{course.course_number}, {course.name}"
    if not course.prerequisites:
        return f"{header}\nNo prerequisites"
    return f"{header}\nPrerequisites: {', '.join(course.prerequisites)}"


def format_course_list(courses: list[Course]) -> str:
    if not courses:
        return NO_COURSES_MESSAGE
    return "\n\n".join(format_course(c) for c in courses)
