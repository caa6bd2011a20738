"""
Unit tests for the custom program use cases.

Tests cover:
- StartNextWeekUseCase: progression, naming, completion, conflicts, failures
- ResetCustomProgramUseCase
- CreateCustomProgramUseCase validation
"""
import pytest

from application.exceptions import (
    CustomProgramNotFoundError,
    ProgramCompleteError,
    ProgramPersistenceError,
    TemplateNotFoundError,
    WeekAdvanceConflictError,
)
from application.use_cases import (
    CreateCustomProgramUseCase,
    CustomProgramValidationError,
    ResetCustomProgramUseCase,
    StartNextWeekUseCase,
)
from application.use_cases.start_next_week import week_template_name, week_workout_name
from domain.models import ProgressionRule
from tests.fakes import (
    SAMPLE_PROGRAM_ID,
    SAMPLE_TEMPLATE_ID,
    FakeCustomProgramRepository,
    FakeTemplateRepository,
    create_custom_program_repos,
)

USER_ID = "test_user"
OTHER_USER_ID = "other_user"


def _squat_weights(exercises):
    squat = next(e for e in exercises if e["name"] == "Squat")
    return [s["weight"] for s in squat["sets"]]


# =============================================================================
# StartNextWeek
# =============================================================================


@pytest.mark.unit
class TestStartNextWeekUseCase:
    """Tests for StartNextWeekUseCase."""

    @pytest.fixture
    def repos(self):
        return create_custom_program_repos(user_id=USER_ID)

    @pytest.fixture
    def use_case(self, repos):
        program_repo, template_repo = repos
        return StartNextWeekUseCase(program_repo=program_repo, template_repo=template_repo)

    def test_starts_week_one(self, use_case, repos):
        program_repo, template_repo = repos

        result = use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=USER_ID)

        assert result.week == 1
        assert result.program.current_week == 2
        assert result.template["name"] == "Strength Block - Week 1"
        assert result.workout["program_day"] == "Strength Block • Week 1"
        assert result.workout["template_id"] == result.template["id"]
        assert result.workout["program_key"] is None
        assert _squat_weights(result.exercises) == [200, 200]
        assert program_repo.get_raw(SAMPLE_PROGRAM_ID)["current_week"] == 2
        assert template_repo.count() == 2

    def test_progresses_each_week(self, use_case):
        weights = []
        for _ in range(3):
            result = use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=USER_ID)
            weights.append(_squat_weights(result.exercises)[0])
        assert weights == [200, 205, 210]

    def test_unruled_and_timed_exercises_unchanged(self, use_case):
        use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=USER_ID)
        result = use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=USER_ID)

        by_name = {e["name"]: e for e in result.exercises}
        assert by_name["Bench Press"]["sets"][0]["weight"] == 150
        assert by_name["Rowing"]["sets"][0]["durationSeconds"] == 600

    def test_passes_expected_week_to_storage(self, use_case, repos):
        program_repo, _ = repos
        use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=USER_ID)

        call = program_repo.atomic_calls[0]
        assert call["expected_week"] == 1
        assert call["template_data"]["user_id"] == USER_ID
        assert call["template_data"]["name"] == week_template_name("Strength Block", 1)

    def test_runs_to_completion(self, use_case):
        for week in range(1, 5):
            assert use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=USER_ID).week == week

        with pytest.raises(ProgramCompleteError):
            use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=USER_ID)

    def test_complete_program_writes_nothing(self):
        program_repo, template_repo = create_custom_program_repos(user_id=USER_ID, current_week=5)
        use_case = StartNextWeekUseCase(program_repo=program_repo, template_repo=template_repo)

        with pytest.raises(ProgramCompleteError):
            use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=USER_ID)

        assert program_repo.atomic_calls == []
        assert template_repo.count() == 1

    def test_other_users_program_not_found(self, use_case):
        with pytest.raises(CustomProgramNotFoundError):
            use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=OTHER_USER_ID)

    def test_missing_program_not_found(self, use_case):
        with pytest.raises(CustomProgramNotFoundError):
            use_case.execute(program_id="missing", user_id=USER_ID)

    def test_missing_template(self):
        template_repo = FakeTemplateRepository()
        program_repo = FakeCustomProgramRepository(template_repo=template_repo)
        program_repo.seed([{
            "id": "p1",
            "user_id": USER_ID,
            "name": "Orphan",
            "template_id": "deleted",
            "weeks": 4,
        }])
        use_case = StartNextWeekUseCase(program_repo=program_repo, template_repo=template_repo)

        with pytest.raises(TemplateNotFoundError):
            use_case.execute(program_id="p1", user_id=USER_ID)
        assert program_repo.get_raw("p1")["current_week"] == 1

    def test_concurrent_advance_conflicts(self, use_case, repos):
        program_repo, template_repo = repos
        program_repo.advance_before_next_atomic()

        with pytest.raises(WeekAdvanceConflictError):
            use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=USER_ID)

        # Only the concurrent request's increment is visible
        assert program_repo.get_raw(SAMPLE_PROGRAM_ID)["current_week"] == 2
        assert program_repo.created_workouts == []
        assert template_repo.count() == 1

    def test_storage_failure_leaves_no_partial_state(self, use_case, repos):
        program_repo, template_repo = repos
        program_repo.fail_next_atomic()

        with pytest.raises(ProgramPersistenceError):
            use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=USER_ID)

        assert program_repo.get_raw(SAMPLE_PROGRAM_ID)["current_week"] == 1
        assert program_repo.created_templates == []
        assert template_repo.count() == 1

    def test_naming_helpers(self):
        assert week_template_name("Block", 3) == "Block - Week 3"
        assert week_workout_name("Block", 3) == "Block • Week 3"


# =============================================================================
# ResetCustomProgram
# =============================================================================


@pytest.mark.unit
class TestResetCustomProgramUseCase:
    def test_resets_to_week_one(self):
        program_repo, _ = create_custom_program_repos(user_id=USER_ID, current_week=5)
        use_case = ResetCustomProgramUseCase(program_repo=program_repo)

        program = use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=USER_ID)

        assert program.current_week == 1
        assert program.is_complete is False
        assert program_repo.get_raw(SAMPLE_PROGRAM_ID)["current_week"] == 1

    def test_other_users_program_not_found(self):
        program_repo, _ = create_custom_program_repos(user_id=USER_ID, current_week=3)
        use_case = ResetCustomProgramUseCase(program_repo=program_repo)

        with pytest.raises(CustomProgramNotFoundError):
            use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=OTHER_USER_ID)
        assert program_repo.get_raw(SAMPLE_PROGRAM_ID)["current_week"] == 3

    def test_storage_failure_raises_persistence_error(self):
        program_repo, _ = create_custom_program_repos(user_id=USER_ID, current_week=3)
        program_repo.fail_next_update()
        use_case = ResetCustomProgramUseCase(program_repo=program_repo)

        with pytest.raises(ProgramPersistenceError):
            use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=USER_ID)
        assert program_repo.get_raw(SAMPLE_PROGRAM_ID)["current_week"] == 3

    def test_invalid_stored_program_raises_persistence_error(self):
        program_repo, _ = create_custom_program_repos(user_id=USER_ID)
        program_repo.get_raw(SAMPLE_PROGRAM_ID)["weeks"] = 6
        use_case = ResetCustomProgramUseCase(program_repo=program_repo)

        with pytest.raises(ProgramPersistenceError):
            use_case.execute(program_id=SAMPLE_PROGRAM_ID, user_id=USER_ID)


# =============================================================================
# CreateCustomProgram
# =============================================================================


@pytest.mark.unit
class TestCreateCustomProgramUseCase:
    @pytest.fixture
    def template_repo(self):
        repo = FakeTemplateRepository()
        repo.seed([{"id": SAMPLE_TEMPLATE_ID, "user_id": USER_ID, "name": "Day", "exercises": []}])
        return repo

    @pytest.fixture
    def program_repo(self):
        return FakeCustomProgramRepository()

    @pytest.fixture
    def use_case(self, program_repo, template_repo):
        return CreateCustomProgramUseCase(program_repo=program_repo, template_repo=template_repo)

    def test_creates_program(self, use_case, program_repo):
        program = use_case.execute(
            user_id=USER_ID,
            name="  Strength Block ",
            template_id=SAMPLE_TEMPLATE_ID,
            weeks=8,
            rules=[ProgressionRule(exercise_name="Squat", increment=5)],
        )

        assert program.name == "Strength Block"
        assert program.weeks == 8
        assert program.current_week == 1
        assert [r.exercise_name for r in program.rules] == ["Squat"]
        assert program_repo.count() == 1

    def test_blank_name_rejected(self, use_case, program_repo):
        with pytest.raises(CustomProgramValidationError) as exc_info:
            use_case.execute(user_id=USER_ID, name="   ", template_id=SAMPLE_TEMPLATE_ID, weeks=4)
        assert exc_info.value.message == "Name is required"
        assert program_repo.count() == 0

    @pytest.mark.parametrize("weeks", [0, 6, 16])
    def test_weeks_option_enforced(self, use_case, weeks):
        with pytest.raises(CustomProgramValidationError):
            use_case.execute(user_id=USER_ID, name="Block", template_id=SAMPLE_TEMPLATE_ID, weeks=weeks)

    def test_template_must_belong_to_user(self, use_case, program_repo):
        with pytest.raises(TemplateNotFoundError):
            use_case.execute(user_id=OTHER_USER_ID, name="Block", template_id=SAMPLE_TEMPLATE_ID, weeks=4)
        assert program_repo.count() == 0
