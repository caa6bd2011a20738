"""
GZCL tiered programs: GZCLP and Jacked & Tan 2.0.

Each day pairs a heavy T1 lift (low reps, terminal AMRAP or rep-max set)
with a moderate-percentage T2 lift and free-text T3 accessories, all off
the same one-rep max at different percentages.
"""

from typing import List, Tuple

from backend.core.programs.base import (
    ProgramDefinition,
    ProgramLevel,
    accessory,
    day,
    lift,
    repeat_sets,
    scheme_sets,
    weight_at,
)
from domain.models import RepMaxes, Tier, WorkoutDay

# =============================================================================
# GZCLP
# =============================================================================

GZCLP_TM_FACTOR = 0.85
GZCLP_T2_PCT = 0.65

# (day, focus, T1 attr, T1 name, T2 attr, T2 name, T3 name)
GZCLP_SCHEDULE: Tuple[Tuple[str, str, str, str, str, str, str], ...] = (
    ("Day 1", "Squat/Bench", "squat", "Squat (T1)", "bench", "Bench (T2)", "Lat Pulldown (T3)"),
    ("Day 2", "OHP/Deadlift", "ohp", "OHP (T1)", "deadlift", "Deadlift (T2)", "Dumbbell Row (T3)"),
    ("Day 3", "Bench/Squat", "bench", "Bench (T1)", "squat", "Squat (T2)", "Lat Pulldown (T3)"),
    ("Day 4", "Deadlift/OHP", "deadlift", "Deadlift (T1)", "ohp", "OHP (T2)", "Dumbbell Row (T3)"),
)


def build_gzclp(maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    def tm(attr: str) -> float:
        return weight_at(getattr(maxes, attr), GZCLP_TM_FACTOR, increment)

    days = []
    for label, focus, t1_attr, t1_name, t2_attr, t2_name, t3_name in GZCLP_SCHEDULE:
        t1_weight = tm(t1_attr)
        t2_weight = weight_at(tm(t2_attr), GZCLP_T2_PCT, increment)
        days.append(
            day(
                label,
                focus,
                [
                    lift(t1_name, repeat_sets(t1_weight, 3, 4) + repeat_sets(t1_weight, "3+", 1)),
                    lift(t2_name, repeat_sets(t2_weight, 10, 3), Tier.T2),
                    accessory(t3_name, "3x15+"),
                ],
            )
        )
    return days


# =============================================================================
# Jacked & Tan 2.0
# =============================================================================

# Block 1 (weeks 1-6) works 10RM down to 6RM, block 2 (weeks 7-12) 8RM down to 2RM
JT2_BLOCK_LENGTH = 6
JT2_BLOCKS = (
    # (rep max targets per week, starting pct, weekly pct step)
    ((10, 10, 8, 8, 6, 6), 0.65, 0.03),
    ((8, 6, 4, 4, 2, 2), 0.75, 0.04),
)
JT2_T2A_DROP = 0.15

# (day, focus, T1 attr, T1 name, T2a attr, T2a name, T2b, T3 accessories)
JT2_SCHEDULE = (
    ("Day 1", "Squat/Bench", "squat", "Squat (T1)", "bench", "Bench Press (T2a)",
     ("Dumbbell Row (T2b)", "4x10"),
     (("Leg Press (T3)", "3x15"), ("Face Pulls (T3)", "3x20"))),
    ("Day 2", "OHP/Deadlift", "ohp", "Overhead Press (T1)", "deadlift", "Deadlift (T2a)",
     ("Front Squat (T2b)", "4x8"),
     (("Lat Pulldown (T3)", "3x15"), ("Tricep Pushdowns (T3)", "3x20"))),
    ("Day 3", "Bench/Squat", "bench", "Bench Press (T1)", "squat", "Squat (T2a)",
     ("Incline DB Press (T2b)", "4x10"),
     (("Leg Curls (T3)", "3x15"), ("Lateral Raises (T3)", "3x20"))),
    ("Day 4", "Deadlift/OHP", "deadlift", "Deadlift (T1)", "ohp", "Overhead Press (T2a)",
     ("Barbell Row (T2b)", "4x10"),
     (("Pull-ups (T3)", "3x max"), ("Bicep Curls (T3)", "3x15"))),
)


def jt2_week_target(week: int) -> Tuple[int, float]:
    """Rep-max target and top-set percentage for a week."""
    block_index, week_in_block = divmod(week - 1, JT2_BLOCK_LENGTH)
    rep_maxes, start_pct, step = JT2_BLOCKS[block_index]
    return rep_maxes[week_in_block], start_pct + week_in_block * step


def jt2_t1_ladder(pct: float, target_rm: int):
    """Ramp to the rep-max set: three warm-up steps 15/10/5 points below it."""
    return (
        (pct - 0.15, 4),
        (pct - 0.10, 4),
        (pct - 0.05, 2),
        (pct, f"{target_rm}RM"),
    )


def build_jt2(maxes: RepMaxes, week: int, increment: float) -> List[WorkoutDay]:
    target_rm, pct = jt2_week_target(week)
    ladder = jt2_t1_ladder(pct, target_rm)

    days = []
    for label, focus, t1_attr, t1_name, t2_attr, t2_name, t2b, t3s in JT2_SCHEDULE:
        t2_weight = weight_at(getattr(maxes, t2_attr), pct - JT2_T2A_DROP, increment)
        exercises = [
            lift(t1_name, scheme_sets(getattr(maxes, t1_attr), ladder, increment)),
            lift(t2_name, repeat_sets(t2_weight, 8, 4), Tier.T2A),
            accessory(t2b[0], t2b[1], Tier.T2B),
        ]
        exercises.extend(accessory(name, text) for name, text in t3s)
        days.append(day(label, focus, exercises))
    return days


GZCLP = ProgramDefinition(
    key="gzclp",
    name="GZCLP",
    level=ProgramLevel.BEGINNER,
    days_per_week=4,
    cycle_length="1 week",
    uses_training_max=True,
    description=(
        "Cody Lefever's beginner GZCL. Balances strength and hypertrophy with "
        "T1/T2/T3 exercise tiers."
    ),
    build=build_gzclp,
)

JACKED_AND_TAN_2 = ProgramDefinition(
    key="jt2",
    name="GZCL Jacked & Tan 2.0",
    level=ProgramLevel.ADVANCED,
    days_per_week=4,
    cycle_length="12 weeks",
    has_weeks=True,
    total_weeks=12,
    description=(
        "High volume GZCL variant focused on hypertrophy and strength. Rep max "
        "progressions with lots of back-off work."
    ),
    build=build_jt2,
)
