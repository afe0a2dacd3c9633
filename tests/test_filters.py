"""Tests for history filtering."""

from datetime import date, datetime, timedelta

import pytest

from lift_log.models.program import Program
from lift_log.models.workout import WorkoutEntry
from lift_log.services.filters import (
    DateRange,
    FilterCriteria,
    filter_by_category_or_program,
    matches_timeframe,
    resolve_program_title,
    select,
    select_with,
)


def make_entry(when, category="chest", exercise="Bench Press", program_id=None):
    return WorkoutEntry(
        category=category,
        exercise=exercise,
        reps=10,
        weight=40,
        date=when,
        program_id=program_id,
    )


class TestSelect:
    """Tests for select() composition."""

    def test_vacuous_filters_return_input_in_order(self, sample_entries, now):
        """All/all with an unset custom range keeps everything."""
        result = select(sample_entries, "all", "custom", DateRange(), "all", now=now)
        assert result == sample_entries

    def test_unrecognized_timeframe_matches_everything(self, sample_entries, now):
        result = select(sample_entries, timeframe="someday", now=now)
        assert result == sample_entries

    def test_category_filter(self, sample_entries, now):
        result = select(sample_entries, "chest", "custom", now=now)
        assert [e.id for e in result] == ["a1", "c3"]

    def test_program_filter(self, sample_entries, now):
        result = select(sample_entries, program_filter="push-pull-legs", timeframe="custom", now=now)
        assert [e.id for e in result] == ["c3"]

    def test_filters_are_anded(self, sample_entries, now):
        """Category, program and timeframe must all match."""
        result = select(
            sample_entries,
            category_filter="chest",
            timeframe="lastWeek",
            program_filter="all",
            now=now,
        )
        # a1 is chest but older than a week
        assert [e.id for e in result] == ["c3"]

        result = select(
            sample_entries,
            category_filter="legs",
            timeframe="lastWeek",
            program_filter="push-pull-legs",
            now=now,
        )
        assert result == []

    def test_select_with_criteria(self, sample_entries, now):
        criteria = FilterCriteria(category="legs", timeframe="lastMonth")
        assert [e.id for e in select_with(sample_entries, criteria, now=now)] == ["b2"]

    def test_default_criteria(self):
        criteria = FilterCriteria()
        assert criteria.category == "all"
        assert criteria.timeframe == "lastWeek"
        assert criteria.program == "all"
        assert not criteria.custom_range.is_complete


class TestLastWeek:
    """Tests for the lastWeek timeframe."""

    def test_last_week_scenario(self, now):
        """10 days ago is dropped, 3 days ago and today are kept."""
        old = make_entry(now - timedelta(days=10), exercise="Old")
        recent = make_entry(now - timedelta(days=3), exercise="Recent")
        today = make_entry(now, exercise="Today")

        result = select([old, recent, today], timeframe="lastWeek", now=now)

        assert result == [recent, today]

    def test_boundaries_are_inclusive(self, now):
        edge = make_entry(now - timedelta(days=7))
        assert select([edge], timeframe="lastWeek", now=now) == [edge]

    def test_future_entries_excluded(self, now):
        future = make_entry(now + timedelta(minutes=1))
        assert select([future], timeframe="lastWeek", now=now) == []


class TestLastMonth:
    """Tests for the lastMonth timeframe."""

    def test_one_calendar_month(self, now):
        inside = make_entry(datetime(2024, 2, 20))
        outside = make_entry(datetime(2024, 2, 10))

        result = select([outside, inside], timeframe="lastMonth", now=now)

        assert result == [inside]

    def test_day_overflow_rolls_forward(self):
        """March 31 minus a month is "Feb 31", i.e. March 2 in 2024."""
        now = datetime(2024, 3, 31, 12, 0)
        early_march = make_entry(datetime(2024, 3, 1, 12, 0))
        after_cutoff = make_entry(datetime(2024, 3, 2, 13, 0))

        result = select([early_march, after_cutoff], timeframe="lastMonth", now=now)

        assert result == [after_cutoff]

    def test_across_year_boundary(self):
        now = datetime(2024, 1, 15, 12, 0)
        december = make_entry(datetime(2023, 12, 20))
        november = make_entry(datetime(2023, 11, 30))

        assert select([november, december], timeframe="lastMonth", now=now) == [december]


class TestCustomRange:
    """Tests for the custom timeframe."""

    def test_january_range(self):
        """Mid-January passes, February 1st does not."""
        custom = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))
        mid = make_entry(datetime(2024, 1, 15, 10, 0))
        february = make_entry(datetime(2024, 2, 1, 0, 0))

        result = select([mid, february], timeframe="custom", custom_range=custom)

        assert result == [mid]

    def test_end_date_covers_whole_day(self):
        custom = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))
        late = make_entry(datetime(2024, 1, 31, 23, 30))
        first = make_entry(datetime(2024, 1, 1, 0, 0))

        assert select([first, late], timeframe="custom", custom_range=custom) == [first, late]

    def test_datetime_bounds_used_as_given(self):
        custom = DateRange(start=datetime(2024, 1, 1, 12, 0), end=datetime(2024, 1, 2, 12, 0))
        morning = make_entry(datetime(2024, 1, 1, 8, 0))
        evening = make_entry(datetime(2024, 1, 1, 20, 0))

        assert select([morning, evening], timeframe="custom", custom_range=custom) == [evening]

    @pytest.mark.parametrize(
        "custom",
        [None, DateRange(), DateRange(start=date(2024, 1, 1)), DateRange(end=date(2024, 1, 31))],
    )
    def test_incomplete_range_matches_everything(self, sample_entries, custom):
        assert select(sample_entries, timeframe="custom", custom_range=custom) == sample_entries


class TestLastWorkout:
    """Tests for the lastWorkout timeframe."""

    def test_only_latest_timestamp_passes(self):
        first = make_entry(datetime(2024, 3, 1, 9, 0))
        second = make_entry(datetime(2024, 3, 5, 9, 0))
        also_second = make_entry(datetime(2024, 3, 5, 9, 0), exercise="Dips")

        result = select([first, second, also_second], timeframe="lastWorkout")

        assert result == [second, also_second]

    def test_empty_collection(self):
        assert select([], timeframe="lastWorkout") == []

    def test_matches_timeframe_with_no_entries(self):
        assert matches_timeframe(datetime(2020, 1, 1), "lastWorkout", [])


class TestMatchesTimeframe:
    """Tests for the single-date predicate."""

    def test_last_week(self, now):
        assert matches_timeframe(now - timedelta(days=2), "lastWeek", [], now=now)
        assert not matches_timeframe(now - timedelta(days=8), "lastWeek", [], now=now)

    def test_custom(self):
        custom = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))
        assert matches_timeframe(datetime(2024, 1, 15), "custom", [], custom)
        assert not matches_timeframe(datetime(2024, 2, 1), "custom", [], custom)


class TestCategoryOrProgram:
    """Tests for filter_by_category_or_program."""

    def test_all_returns_everything(self, sample_entries):
        assert filter_by_category_or_program(sample_entries, "all") == sample_entries

    def test_matches_category_or_program(self, sample_entries):
        assert [e.id for e in filter_by_category_or_program(sample_entries, "legs")] == ["b2"]
        result = filter_by_category_or_program(sample_entries, "push-pull-legs")
        assert [e.id for e in result] == ["c3"]


class TestResolveProgramTitle:
    """Tests for program title display."""

    def test_known_program(self):
        programs = [Program(id="p1", title="Upper Body")]
        assert resolve_program_title(programs, "p1") == "Upper Body"

    def test_dangling_reference_shows_raw_id(self):
        programs = [Program(id="p1", title="Upper Body")]
        assert resolve_program_title(programs, "program-gone") == "program-gone"

    def test_no_program(self):
        assert resolve_program_title([], None) == ""
