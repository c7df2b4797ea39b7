from data_loader import read_course_records
from export_courses_table import courses_to_frame, export


class TestCoursesToFrame:
    def test_columns_and_joined_prereqs(self, dataset_courses):
        df = courses_to_frame(dataset_courses)
        assert list(df.columns) == ["course_number", "name", "prerequisites"]
        row = df[df["course_number"] == "CSCI300"].iloc[0]
        assert row["prerequisites"] == "CSCI200; MATH201"

    def test_empty(self):
        assert len(courses_to_frame([])) == 0


class TestExport:
    def test_csv_round_trips_through_loader(self, dataset_path, tmp_path):
        out = str(tmp_path / "courses.csv")
        assert export(dataset_path, out) == 0
        assert read_course_records(out) == read_course_records(dataset_path)

    def test_xlsx(self, dataset_path, tmp_path):
        out = str(tmp_path / "nested" / "courses.xlsx")
        assert export(dataset_path, out) == 0
        courses = read_course_records(out)
        assert courses[0].course_number == "CSCI300"
        assert courses[0].prerequisites == ("CSCI200", "MATH201")

    def test_missing_source(self, tmp_path):
        assert export(str(tmp_path / "missing.txt"), str(tmp_path / "out.csv")) == 1
