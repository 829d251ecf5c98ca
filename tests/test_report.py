"""Tests for the sparkline history and score report."""

from datetime import date

import pytest

from habitctl.models.habit import Habit
from habitctl.services.habits.report import ReportRenderer, format_label, spark


@pytest.mark.parametrize("score,glyph", [
    (0.0, " "),
    (0.1, " "),
    (0.12, "▁"),
    (0.5, "▄"),
    (0.99, "█"),
    (1.0, "█"),
    (3.0, "█"),
    (-1.0, " "),
])
def test_spark_buckets(score, glyph):
    assert spark(score) == glyph


def test_label_is_right_aligned_and_truncated():
    assert format_label("Run") == " " * 22 + "Run "
    assert format_label("A" * 30) == "A" * 25 + " "


class TestHabitRow:

    def test_row_layout(self, make_engine, meditated):
        engine = make_engine([meditated], [
            (date(2024, 1, 1), "Meditated", 1),
            (date(2024, 1, 2), "Meditated", 0),
        ])
        renderer = ReportRenderer(engine)

        row = renderer.habit_row(meditated, date(2024, 1, 1), date(2024, 1, 3))

        # percentage is taken the day before the last one shown
        assert row == format_label("Meditated") + "█  " + "   0.0% "

    def test_percentage_uses_one_decimal(self, make_engine):
        water = Habit(every_days=3, range=3, name="Glasses of water")
        engine = make_engine([water], [(date(2024, 1, 1), "Glasses of water", 1)])
        renderer = ReportRenderer(engine)

        row = renderer.habit_row(water, date(2024, 1, 1), date(2024, 1, 2))

        assert row.endswith("  33.3% ")

    def test_unscored_habit_gets_blank_percentage(self, make_engine):
        tracking = Habit(every_days=0, range=1, name="Had a headache")
        engine = make_engine([tracking], [(date(2024, 1, 1), "Had a headache", 1)])
        renderer = ReportRenderer(engine)

        row = renderer.habit_row(tracking, date(2024, 1, 1), date(2024, 1, 2))

        assert row == format_label("Had a headache") + "█ " + " " * 7


class TestRender:

    def test_full_report(self, make_engine, meditated, weekly):
        engine = make_engine([meditated, weekly], [
            (date(2024, 1, 9), "Meditated", 1),
            (date(2024, 1, 9), "Cleaned the apartment", 1),
        ])
        renderer = ReportRenderer(engine)

        lines = renderer.render(date(2024, 1, 10), days=2).split("\n")

        assert len(lines) == 4
        # on the 10th only the weekly habit is still within its window
        assert lines[0] == format_label("") + " █▄"
        assert lines[1].startswith(format_label("Meditated") + " █ ")
        assert lines[2].startswith(format_label("Cleaned the apartment") + " █ ")
        assert lines[3] == "Total score: 100.0%"

    def test_filters_are_case_insensitive(self, make_engine, meditated, weekly):
        engine = make_engine([meditated, weekly])
        renderer = ReportRenderer(engine)

        report = renderer.render(date(2024, 1, 10), filters=["APART"], days=3)

        assert "Cleaned the apartment" in report
        assert "Meditated" not in report
        assert report.endswith("Total score: 0.0%")

    def test_any_filter_matches(self, make_engine, meditated, weekly):
        engine = make_engine([meditated, weekly])
        renderer = ReportRenderer(engine)

        report = renderer.render(date(2024, 1, 10), filters=["medit", "clean"], days=3)

        assert "Cleaned the apartment" in report
        assert "Meditated" in report

    def test_no_habits_renders_nothing(self, make_engine):
        assert ReportRenderer(make_engine([])).render(date(2024, 1, 10)) == ""
