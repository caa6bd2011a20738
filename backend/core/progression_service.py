"""
Progression Service for custom programs.

A custom program replays one of the user's workout templates week after
week, adding a fixed increment per elapsed week to the exercises that have
a progression rule:

    weight(week) = base + increment * (week - 1)

where ``base`` is the rule's base-weight override when one is set, or the
template set's own weight otherwise.

Templates arrive as loosely-typed JSON from storage, so this module also
normalizes them into domain models before progressing.
"""
from typing import Any, Dict, Iterable, List, Optional
import logging
import math

from pydantic import ValidationError

from application.exceptions import ProgramPersistenceError
from domain.models import CustomProgram, ProgressionRule, TemplateExercise, TemplateSet

logger = logging.getLogger(__name__)


# =============================================================================
# Normalization
# =============================================================================


def _normalize_sets(exercise_name: str, raw_sets: Any) -> List[TemplateSet]:
    if not isinstance(raw_sets, list):
        return []

    sets: List[TemplateSet] = []
    for index, raw_set in enumerate(raw_sets):
        if isinstance(raw_set, TemplateSet):
            sets.append(raw_set)
            continue
        if not isinstance(raw_set, dict):
            logger.warning(
                f"Dropping non-object set {index} of template exercise '{exercise_name}'"
            )
            continue
        try:
            sets.append(TemplateSet.model_validate(raw_set))
        except ValidationError as e:
            logger.warning(
                f"Dropping malformed set {index} of template exercise '{exercise_name}': "
                f"{e.error_count()} validation error(s)"
            )
    return sets


def normalize_template_exercises(raw: Any) -> List[TemplateExercise]:
    """
    Coerce stored template exercises into TemplateExercise models.

    - Anything other than a list yields an empty list
    - Bare strings become exercises with no sets
    - Objects without a usable name are discarded
    - ``sets`` is always a list; malformed set entries are dropped

    Args:
        raw: The ``exercises`` column of a workout template

    Returns:
        Normalized exercises in their original order
    """
    if not isinstance(raw, list):
        return []

    exercises: List[TemplateExercise] = []
    for entry in raw:
        if isinstance(entry, TemplateExercise):
            exercises.append(entry)
        elif isinstance(entry, str):
            name = entry.strip()
            if name:
                exercises.append(TemplateExercise(name=name, sets=[]))
        elif isinstance(entry, dict):
            name = str(entry.get("name") or "").strip()
            if not name:
                continue
            exercises.append(
                TemplateExercise(name=name, sets=_normalize_sets(name, entry.get("sets")))
            )
    return exercises


def normalize_progression_rules(raw: Any) -> List[ProgressionRule]:
    """Coerce stored progression rules, skipping entries that do not validate."""
    if not isinstance(raw, list):
        return []

    rules: List[ProgressionRule] = []
    for entry in raw:
        if isinstance(entry, ProgressionRule):
            rules.append(entry)
            continue
        try:
            rules.append(ProgressionRule.model_validate(entry))
        except ValidationError:
            logger.warning(f"Skipping malformed progression rule: {entry!r}")
    return rules


# =============================================================================
# Progression
# =============================================================================


def _rule_map(rules: Iterable[ProgressionRule]) -> Dict[str, ProgressionRule]:
    # Later rules for the same exercise replace earlier ones
    return {rule.match_key: rule for rule in rules}


def _progress_set(
    template_set: TemplateSet,
    rule: Optional[ProgressionRule],
    week: int,
) -> TemplateSet:
    if template_set.is_timed:
        return template_set

    increment = (rule.increment if rule else None) or 0
    override = rule.base_weight if rule else None
    has_override = override is not None and math.isfinite(override)

    base = override if has_override else template_set.weight
    should_progress = increment != 0 and (has_override or base > 0)
    next_weight = base + increment * (week - 1) if should_progress else base

    if not math.isfinite(next_weight):
        next_weight = template_set.weight
    return template_set.model_copy(update={"weight": next_weight})


def build_progressed_exercises(
    exercises: List[TemplateExercise],
    rules: List[ProgressionRule],
    week: int,
) -> List[TemplateExercise]:
    """
    Apply progression rules to a template for a given week.

    Rules match exercises by case-insensitive name. Sets with a duration
    (cardio, holds) pass through unchanged. Exercises without a rule keep
    their template weights. Inputs are not mutated.

    Args:
        exercises: Normalized template exercises
        rules: Progression rules for the program
        week: 1-based week being started

    Returns:
        New exercises with progressed set weights
    """
    rule_map = _rule_map(rules)

    progressed: List[TemplateExercise] = []
    for exercise in exercises:
        rule = rule_map.get(exercise.name.strip().lower())
        sets = [_progress_set(s, rule, week) for s in exercise.sets]
        progressed.append(exercise.model_copy(update={"sets": sets}))
    return progressed


def exercises_to_storage(exercises: List[TemplateExercise]) -> List[Dict[str, Any]]:
    """Serialize exercises for the template ``exercises`` JSON column."""
    return [e.model_dump(by_alias=True, exclude_none=True) for e in exercises]


def custom_program_from_row(row: Dict[str, Any]) -> CustomProgram:
    """
    Build a CustomProgram from a ``custom_programs`` row, tolerating bad rules.

    Raises:
        ProgramPersistenceError: If the stored row itself is invalid
            (unsupported ``weeks``, ``current_week`` below 1, missing fields)
    """
    try:
        return CustomProgram.model_validate(
            {**row, "rules": normalize_progression_rules(row.get("rules"))}
        )
    except ValidationError as e:
        logger.error(
            f"Stored custom program {row.get('id')} is invalid: "
            f"{e.error_count()} validation error(s)"
        )
        raise ProgramPersistenceError(f"Stored custom program {row.get('id')} is invalid") from e
