"""
Unit tests for the rep max use cases.

Tests cover:
- RepMaxesUseCase: estimation, replacement, stored-row validation
- GetUserWorkoutsUseCase: week selection and the not-configured cases
- rep_maxes_from_stored
"""
import pytest

from application.exceptions import (
    ProgramNotConfiguredError,
    ProgramPersistenceError,
    UnknownProgramError,
)
from application.use_cases import GetUserWorkoutsUseCase, RepMaxesUseCase
from backend.core.programs import generate_program_workouts
from domain.models import RepMaxes, StoredRepMax, rep_maxes_from_stored
from tests.fakes import FakeRepMaxRepository, FakeUserProgramRepository

USER_ID = "test_user"
MAXES = {"squat": 300, "bench": 200, "deadlift": 400, "ohp": 100}


@pytest.mark.unit
class TestRepMaxesFromStored:
    def test_all_lifts_combined(self):
        stored = [StoredRepMax(exercise=k, weight=v, reps=1, one_rm=v) for k, v in MAXES.items()]
        assert rep_maxes_from_stored(stored) == RepMaxes(**MAXES)

    def test_missing_lift_yields_none(self):
        stored = [StoredRepMax(exercise="squat", weight=300, reps=1, one_rm=300)]
        assert rep_maxes_from_stored(stored) is None

    def test_camel_case_one_rm(self):
        rm = StoredRepMax.model_validate({"exercise": "ohp", "weight": 95, "reps": 3, "oneRM": 105})
        assert rm.one_rm == 105


@pytest.mark.unit
class TestRepMaxesUseCase:
    @pytest.fixture
    def repo(self):
        return FakeRepMaxRepository()

    @pytest.fixture
    def use_case(self, repo):
        return RepMaxesUseCase(rep_max_repo=repo)

    def test_estimates_missing_one_rm(self, use_case):
        saved = use_case.save(USER_ID, [("squat", 250, 5, None), ("bench", 185, 1, None)])

        assert [(rm.exercise, rm.one_rm) for rm in saved] == [("squat", 292), ("bench", 185)]

    def test_explicit_one_rm_kept(self, use_case):
        saved = use_case.save(USER_ID, [("deadlift", 365, 3, 400)])
        assert saved[0].one_rm == 400

    def test_save_replaces_lift(self, use_case, repo):
        use_case.save(USER_ID, [("squat", 300, 1, None)])
        use_case.save(USER_ID, [("squat", 320, 1, None)])

        assert [rm.one_rm for rm in use_case.list(USER_ID)] == [320]
        assert repo.count() == 1

    def test_storage_failure(self, use_case, repo):
        repo.fail_next_upsert()

        with pytest.raises(ProgramPersistenceError):
            use_case.save(USER_ID, [("ohp", 100, 1, None)])
        assert repo.count() == 0

    def test_invalid_stored_row(self, use_case, repo):
        repo.seed(USER_ID, {"curl": 50})

        with pytest.raises(ProgramPersistenceError):
            use_case.list(USER_ID)


@pytest.mark.unit
class TestGetUserWorkoutsUseCase:
    @pytest.fixture
    def rep_max_repo(self):
        repo = FakeRepMaxRepository()
        repo.seed(USER_ID, MAXES)
        return repo

    @pytest.fixture
    def user_program_repo(self):
        return FakeUserProgramRepository()

    @pytest.fixture
    def use_case(self, user_program_repo, rep_max_repo):
        return GetUserWorkoutsUseCase(
            user_program_repo=user_program_repo,
            rep_max_repo=rep_max_repo,
        )

    def test_uses_current_week(self, use_case, user_program_repo):
        user_program_repo.seed(USER_ID, "531", current_week=2)

        program_key, week, days = use_case.execute(USER_ID)

        assert (program_key, week) == ("531", 2)
        assert days == generate_program_workouts("531", RepMaxes(**MAXES), 2)

    def test_explicit_week_clamped(self, use_case, user_program_repo):
        user_program_repo.seed(USER_ID, "juggernaut", current_week=2)

        _, week, _ = use_case.execute(USER_ID, week=40)

        assert week == 16

    def test_increment_applied(self, user_program_repo, rep_max_repo):
        user_program_repo.seed(USER_ID, "531", current_week=1)
        use_case = GetUserWorkoutsUseCase(
            user_program_repo=user_program_repo,
            rep_max_repo=rep_max_repo,
            increment=2.5,
        )

        _, _, days = use_case.execute(USER_ID)

        assert days == generate_program_workouts("531", RepMaxes(**MAXES), 1, increment=2.5)

    def test_no_state_not_configured(self, use_case):
        with pytest.raises(ProgramNotConfiguredError) as exc_info:
            use_case.execute(USER_ID)
        assert exc_info.value.reason == "No program selected"

    def test_missing_lift_not_configured(self, use_case, user_program_repo, rep_max_repo):
        rep_max_repo.reset()
        rep_max_repo.seed(USER_ID, {"squat": 300})
        user_program_repo.seed(USER_ID, "531")

        with pytest.raises(ProgramNotConfiguredError):
            use_case.execute(USER_ID)

    def test_program_left_catalog(self, use_case, user_program_repo):
        user_program_repo.seed(USER_ID, "retired")

        with pytest.raises(UnknownProgramError):
            use_case.execute(USER_ID)
