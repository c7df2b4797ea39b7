import pytest
from planner_menu import PlannerSession, run_menu


class ScriptedIO:
    """Feeds canned answers to input() and records everything printed."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.lines: list[str] = []

    def read(self, prompt=""):
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, text=""):
        self.lines.append(str(text))

    @property
    def text(self):
        return "\n".join(self.lines)


@pytest.fixture
def io():
    return ScriptedIO([])


@pytest.fixture
def session(dataset_path, io):
    return PlannerSession(dataset_path, read=io.read, output=io.write)


class TestPlannerSession:
    def test_load_success(self, session, io):
        assert session.load() is True
        assert session.catalog.store.size() == 7
        assert "Data successfully loaded." in io.text

    def test_load_missing_file_keeps_previous(self, session, io, tmp_path):
        session.load()
        previous = session.catalog
        session.data_path = str(tmp_path / "missing.txt")
        assert session.load() is False
        assert session.catalog is previous
        assert "Could not access courses file" in io.text

    def test_load_empty_file_keeps_previous(self, session, io, tmp_path):
        session.load()
        previous = session.catalog
        empty = tmp_path / "empty.txt"
        empty.write_text("", encoding="utf-8")
        session.data_path = str(empty)
        assert session.load() is False
        assert session.catalog is previous
        assert "Courses file appears to be empty." in io.text

    def test_list_before_load(self, session, io):
        session.print_course_list()
        assert "No courses loaded. Please load data first." in io.text

    def test_list_is_sorted(self, session, io):
        session.load()
        io.lines.clear()
        session.print_course_list()
        assert io.text.index("CSCI100,") < io.text.index("CSCI101,") < io.text.index("CSCI400,")

    def test_print_course_before_load(self, session, io):
        session.print_course()
        assert io.text == "Please load courses first."

    def test_print_course_case_insensitive(self, session, io):
        session.load()
        io.answers = ["csci300"]
        session.print_course()
        assert "CSCI300, Introduction to Algorithms" in io.text
        assert "Prerequisites: CSCI200, MATH201" in io.text

    def test_print_course_not_found(self, session, io):
        session.load()
        io.answers = ["MATH201"]
        session.print_course()
        assert "Course MATH201 not found." in io.text

    def test_print_unlocks(self, session, io):
        session.load()
        io.answers = ["CSCI101"]
        session.print_unlocks()
        assert "CSCI200, Data Structures" in io.text
        assert "CSCI301, Advanced Programming in C++" in io.text

    def test_print_unlocks_none(self, session, io):
        session.load()
        io.answers = ["CSCI400"]
        session.print_unlocks()
        assert "No courses become available after completing CSCI400." in io.text

    def test_invalid_option(self, session, io):
        assert session.handle("7") is True
        assert "7 is not a valid option." in io.text

    def test_exit_option(self, session):
        assert session.handle("9") is False


class TestRunMenu:
    def test_full_session(self, dataset_path):
        io = ScriptedIO(["1", "3", "CSCI100", "9"])
        assert run_menu(dataset_path, read=io.read, output=io.write) == 0
        assert io.lines[0] == "Welcome to the course planner."
        assert "CSCI100, Introduction to Computer Science" in io.text
        assert io.lines[-1] == "Thank you for using the course planner!"

    def test_end_of_input_exits(self, dataset_path):
        io = ScriptedIO(["2"])
        assert run_menu(dataset_path, read=io.read, output=io.write) == 0
        assert io.lines[-1] == "Thank you for using the course planner!"
