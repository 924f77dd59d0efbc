"""
Step catalog and the section gating rule.

The store itself never blocks navigation. Callers (the HTTP adapter, or any
other presentation layer) check can_leave_step() before dispatching
advance(), so the store stays independent of the question catalogs.
"""

from typing import List, Mapping, Optional, Union

from models.enums import SECTION_QUESTIONS, STEPS, Step
from models.schemas import SectionCatalog, SectionProgress

TERMINAL_STEP: int = len(STEPS) - 1

StepRef = Union[int, Step, str]


def _resolve_step(step: StepRef) -> Step:
    if isinstance(step, Step):
        return step
    if isinstance(step, int):
        return STEPS[max(0, min(step, TERMINAL_STEP))]
    return Step(step)


def step_name(index: int) -> str:
    """Name of the step at an index; out-of-range indices are clamped."""
    return _resolve_step(index).value


def step_index(step: StepRef) -> int:
    return STEPS.index(_resolve_step(step))


def section_questions(step: StepRef) -> List[str]:
    """Question ids gating a step; empty for steps without questions."""
    return list(SECTION_QUESTIONS.get(_resolve_step(step), []))


def missing_questions(step: StepRef, responses: Mapping[str, object]) -> List[str]:
    """Catalog questions of a step that have no entry in the response map."""
    return [qid for qid in section_questions(step) if responses.get(qid) is None]


def can_leave_step(step: StepRef, responses: Mapping[str, object]) -> bool:
    """
    Gating rule for a step's "continue" control.

    A question-bearing step may be left only once every one of its
    questions has an answer. Steps without questions are always passable.
    """
    return not missing_questions(step, responses)


def section_progress(step: StepRef, responses: Mapping[str, object]) -> SectionProgress:
    questions = section_questions(step)
    answered = sum(1 for qid in questions if responses.get(qid) is not None)
    return SectionProgress(answered=answered, total=len(questions))


def section_catalog() -> List[SectionCatalog]:
    """Every step in order with the question ids it gates on."""
    return [
        SectionCatalog(index=i, name=step.value, question_ids=section_questions(step))
        for i, step in enumerate(STEPS)
    ]


def first_incomplete_step(target: StepRef, responses: Mapping[str, object]) -> Optional[Step]:
    """
    First step before ``target`` that still has unanswered questions.

    A forward jump to ``target`` is allowed only when this is None, so the
    results step cannot be reached without clearing every section.
    """
    for step in STEPS[:step_index(target)]:
        if missing_questions(step, responses):
            return step
    return None
