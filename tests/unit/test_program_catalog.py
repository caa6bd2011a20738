"""
Unit tests for the program catalog.

Tests cover:
- Catalog order and lookup
- Generation determinism and week handling
- Plate-increment rounding across every program
- Next-day selection
"""
import pytest

from application.exceptions import UnknownProgramError
from backend.core.programs import (
    PROGRAMS,
    generate_program_workouts,
    get_next_workout_day,
    get_program,
    list_programs,
    resolve_week,
)
from domain.models import AmrapSet, NumericSet, RepMaxes, RepMaxSet

CATALOG_ORDER = [
    "531",
    "nsuns",
    "sl5x5",
    "gzclp",
    "texas",
    "greyskull",
    "531bbb",
    "531fsl",
    "smolovJr",
    "candito6week",
    "juggernaut",
    "jt2",
    "calgaryBarbell",
    "sheiko29",
]

# Deliberately awkward maxes so rounding does real work
ODD_MAXES = RepMaxes(squat=317, bench=223, deadlift=411, ohp=137)


def _weighted_sets(days):
    for workout_day in days:
        for exercise in workout_day.exercises:
            if exercise.is_free_text:
                continue
            for s in exercise.sets:
                if isinstance(s, (NumericSet, AmrapSet, RepMaxSet)):
                    yield s


def _all_weeks(program):
    return range(1, program.total_weeks + 1) if program.has_weeks else [None]


@pytest.mark.unit
class TestCatalog:
    """Tests for catalog lookup."""

    def test_catalog_order(self):
        assert [p.key for p in list_programs()] == CATALOG_ORDER

    def test_get_program(self):
        program = get_program("531")
        assert program.name == "Wendler's 5/3/1"
        assert program.total_weeks == 4
        assert program.uses_training_max is True

    def test_unknown_program_raises(self):
        with pytest.raises(UnknownProgramError) as exc_info:
            get_program("nope")
        assert exc_info.value.program_key == "nope"

    def test_generate_unknown_program_raises(self):
        with pytest.raises(UnknownProgramError):
            generate_program_workouts("nope", ODD_MAXES)

    @pytest.mark.parametrize("key", [k for k in CATALOG_ORDER if k not in ("sl5x5", "greyskull")])
    def test_day_count_matches_metadata(self, key):
        program = PROGRAMS[key]
        for week in _all_weeks(program):
            assert len(generate_program_workouts(key, ODD_MAXES, week)) == program.days_per_week

    @pytest.mark.parametrize("key", ["sl5x5", "greyskull"])
    def test_alternating_programs_have_two_workouts(self, key):
        """A/B programs list two workouts trained over three days a week."""
        days = generate_program_workouts(key, ODD_MAXES)
        assert [d.day for d in days] == ["Workout A", "Workout B"]
        assert PROGRAMS[key].days_per_week == 3

    def test_week_invariant_programs(self):
        invariant = {p.key for p in list_programs() if not p.has_weeks}
        assert invariant == {"nsuns", "sl5x5", "gzclp", "texas", "greyskull"}
        assert all(PROGRAMS[k].total_weeks == 1 for k in invariant)


@pytest.mark.unit
class TestGeneration:
    """Tests for generate_program_workouts."""

    @pytest.mark.parametrize("key", CATALOG_ORDER)
    def test_deterministic(self, key):
        program = PROGRAMS[key]
        for week in _all_weeks(program):
            first = generate_program_workouts(key, ODD_MAXES, week)
            second = generate_program_workouts(key, ODD_MAXES, week)
            assert first == second

    @pytest.mark.parametrize("key", CATALOG_ORDER)
    @pytest.mark.parametrize("increment", [5, 2.5])
    def test_weights_land_on_increment(self, key, increment):
        program = PROGRAMS[key]
        for week in _all_weeks(program):
            days = generate_program_workouts(key, ODD_MAXES, week, increment=increment)
            for s in _weighted_sets(days):
                steps = s.weight / increment
                assert abs(steps - round(steps)) < 1e-9, (key, week, s)

    @pytest.mark.parametrize("key", CATALOG_ORDER)
    def test_zero_maxes_do_not_raise(self, key):
        program = PROGRAMS[key]
        for week in _all_weeks(program):
            for s in _weighted_sets(generate_program_workouts(key, RepMaxes(), week)):
                assert s.weight >= 0

    def test_week_none_is_week_one(self):
        assert generate_program_workouts("531", ODD_MAXES) == generate_program_workouts(
            "531", ODD_MAXES, 1
        )

    def test_week_past_end_repeats_last_week(self):
        assert generate_program_workouts("531", ODD_MAXES, 9) == generate_program_workouts(
            "531", ODD_MAXES, 4
        )

    def test_week_below_one_runs_week_one(self):
        assert generate_program_workouts("juggernaut", ODD_MAXES, 0) == generate_program_workouts(
            "juggernaut", ODD_MAXES, 1
        )
        assert generate_program_workouts("juggernaut", ODD_MAXES, -3) == generate_program_workouts(
            "juggernaut", ODD_MAXES, 1
        )

    def test_week_invariant_program_ignores_week(self):
        assert generate_program_workouts("nsuns", ODD_MAXES, 5) == generate_program_workouts(
            "nsuns", ODD_MAXES
        )

    def test_resolve_week(self):
        assert resolve_week(None, 12) == 1
        assert resolve_week(7, 12) == 7
        assert resolve_week(20, 12) == 12
        assert resolve_week(0, 12) == 1

    def test_resolve_week_on_definition(self):
        assert PROGRAMS["nsuns"].resolve_week(3) == 1
        assert PROGRAMS["sheiko29"].resolve_week(6) == 4

    def test_readme_example(self):
        maxes = RepMaxes(squat=300, bench=200, deadlift=350, ohp=120)
        days = generate_program_workouts("531", maxes, week=3)
        assert [s.as_wire() for s in days[0].exercises[0].sets] == [
            {"weight": 205, "reps": 5},
            {"weight": 230, "reps": 3},
            {"weight": 255, "reps": "1+"},
        ]


@pytest.mark.unit
class TestNextWorkoutDay:
    """Tests for get_next_workout_day."""

    def test_first_day_when_nothing_completed(self):
        assert get_next_workout_day("531") == "Day 1"

    def test_skips_completed_days(self):
        assert get_next_workout_day("531", ["Day 1", "Day 2"]) == "Day 3"

    def test_out_of_order_completion(self):
        assert get_next_workout_day("531", ["Day 2"]) == "Day 1"

    def test_wraps_when_all_completed(self):
        assert get_next_workout_day("531", ["Day 1", "Day 2", "Day 3", "Day 4"]) == "Day 1"

    def test_uses_program_day_labels(self):
        assert get_next_workout_day("nsuns", ["Monday"]) == "Tuesday"
        assert get_next_workout_day("sl5x5", ["Workout A"]) == "Workout B"

    def test_unknown_program_returns_empty(self):
        assert get_next_workout_day("nope", ["Day 1"]) == ""
