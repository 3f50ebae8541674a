"""
Visibility Evaluator - Decides whether a question (or option) is shown.

Used by the wizard to re-evaluate every question after each answer
change. Evaluation never raises: missing answers and type mismatches
resolve to a definite True/False per operator.
"""
import logging
from typing import Mapping, Optional

from .formatting import format_number
from .models import Question, QuestionOption, VisibilityConfig, VisibilityRule, is_number

logger = logging.getLogger(__name__)

_MISSING = object()


def _as_text(value) -> Optional[str]:
    """Text form used for equality; None when the value is not comparable."""
    if isinstance(value, str):
        return value
    if is_number(value):
        return format_number(value)
    return None


def _as_number(value) -> Optional[float]:
    if is_number(value):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _is_empty(answer) -> bool:
    if answer is _MISSING or answer is None:
        return True
    if isinstance(answer, str) and answer == '':
        return True
    if isinstance(answer, (list, tuple)) and len(answer) == 0:
        return True
    return False


def _equals(answer, expected) -> bool:
    if answer is _MISSING:
        return False
    text = _as_text(answer)
    return text is not None and text == _as_text(expected)


def _includes(answer, expected) -> bool:
    if answer is _MISSING or answer is None:
        return False
    if isinstance(answer, (list, tuple)):
        return expected in answer
    # A scalar answer behaves like a single-element list
    return _equals(answer, expected)


def _compare(answer, expected, operator: str) -> bool:
    if not is_number(answer):
        return False
    threshold = _as_number(expected)
    if threshold is None:
        return False
    if operator == 'greater_than':
        return answer > threshold
    return answer < threshold


def evaluate_rule(rule: VisibilityRule, answers: Mapping) -> bool:
    """Evaluate a single rule against the collected answers."""
    answer = answers.get(rule.question_key, _MISSING)
    op = rule.operator

    if op == 'equals':
        return _equals(answer, rule.value)
    elif op == 'not_equals':
        return not _equals(answer, rule.value)
    elif op == 'includes':
        return _includes(answer, rule.value)
    elif op == 'not_includes':
        return not _includes(answer, rule.value)
    elif op == 'is_empty':
        return _is_empty(answer)
    elif op == 'is_not_empty':
        return not _is_empty(answer)
    elif op in ('greater_than', 'less_than'):
        return _compare(answer, rule.value, op)

    logger.debug("Unknown visibility operator %r on %s", op, rule.question_key)
    return False


def is_visible(config, answers: Mapping) -> bool:
    """
    Decide whether a target should be presented.

    Args:
        config: VisibilityConfig, an equivalent mapping, or None
        answers: question key -> raw answer value

    Returns:
        True when there are no rules; otherwise the combined rule result,
        negated when the action is "hide".
    """
    config = VisibilityConfig.coerce(config)
    if config is None or not config.rules:
        return True

    results = [evaluate_rule(rule, answers) for rule in config.rules]
    if config.logic == 'any':
        matched = any(results)
    else:
        matched = all(results)

    if config.action == 'hide':
        return not matched
    return matched


def visible_questions(questions: list[Question], answers: Mapping) -> list[Question]:
    """Questions whose visibility rules currently pass, in input order."""
    return [q for q in questions if is_visible(q.visibility_rules, answers)]


def visible_options(question: Question, answers: Mapping) -> list[QuestionOption]:
    """Options of a select question whose visibility rules currently pass."""
    return [o for o in question.options if is_visible(o.visibility_rules, answers)]
