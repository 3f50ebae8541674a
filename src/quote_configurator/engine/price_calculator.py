"""
Price Calculator - Folds a base price range and modifiers into an estimate.

Resolution order:
1. Start from the pricing definition's base min/max
2. For each declared modifier, look up the answer to its question
3. Dispatch on the answer's shape:
   - string: exact option match, flat amount
   - list of strings: membership, flat amount
   - number: "*"/"any" sentinel, amount x answer
   - dimensions: "area"/"m2" sentinel, amount x area in m2
4. Sum applied amounts onto both bounds, keeping a breakdown in
   declaration order

Unmatched or unrecognized answers skip the modifier; nothing raises.
"""
import logging
from typing import Mapping, Optional

from .formatting import format_number
from .models import (
    DimensionsAnswer,
    ModifierLine,
    NumberAnswer,
    PriceBreakdown,
    PriceModifier,
    PriceResult,
    PricingDefinition,
    Question,
    StringAnswer,
    StringListAnswer,
    parse_answer,
)

logger = logging.getLogger(__name__)

PER_UNIT_SENTINELS = ('*', 'any')
PER_AREA_SENTINELS = ('area', 'm2')


def _option_label(question: Optional[Question], option_value: str) -> str:
    """Label of the matching option, falling back to the raw value."""
    if question is not None:
        option = question.find_option(option_value)
        if option is not None and option.label:
            return option.label
    return option_value


def _question_label(question: Optional[Question], question_key: str) -> str:
    return question.label if question is not None else question_key


def _apply_modifier(
    modifier: PriceModifier,
    question: Optional[Question],
    raw_answer,
) -> Optional[ModifierLine]:
    """Return the breakdown line for a modifier, or None if it does not apply."""
    answer = parse_answer(raw_answer)

    if isinstance(answer, StringAnswer):
        if answer.value == modifier.option_value:
            return ModifierLine(
                label=_option_label(question, modifier.option_value),
                amount=modifier.modifier,
            )

    elif isinstance(answer, StringListAnswer):
        if modifier.option_value in answer.values:
            return ModifierLine(
                label=_option_label(question, modifier.option_value),
                amount=modifier.modifier,
            )

    elif isinstance(answer, NumberAnswer):
        if modifier.option_value in PER_UNIT_SENTINELS:
            label = _question_label(question, modifier.question_key)
            return ModifierLine(
                label=f"{label}: {format_number(answer.value)}",
                amount=modifier.modifier * answer.value,
            )

    elif isinstance(answer, DimensionsAnswer):
        if modifier.option_value in PER_AREA_SENTINELS:
            area = answer.area_m2
            label = _question_label(question, modifier.question_key)
            return ModifierLine(
                label=f"{label}: {area:.1f} m²",
                amount=modifier.modifier * area,
            )

    else:
        logger.debug(
            "Skipping modifier %s=%s: unrecognized answer %r",
            modifier.question_key, modifier.option_value, raw_answer,
        )

    return None


def calculate_price(pricing, questions, answers: Mapping) -> PriceResult:
    """
    Calculate a price estimate from a pricing definition and answers.

    Args:
        pricing: PricingDefinition or an equivalent mapping
        questions: Question list used only for label lookup
        answers: question key -> raw answer value

    Returns:
        PriceResult with min/max and an ordered breakdown
    """
    try:
        pricing = PricingDefinition.coerce(pricing)
    except (TypeError, ValueError) as e:
        logger.warning("Unusable pricing definition, returning zero estimate: %s", e)
        pricing = None
    if pricing is None:
        return PriceResult.zero()

    modifier_min = 0
    modifier_max = 0
    lines: list[ModifierLine] = []

    question_map: dict[str, Question] = {}
    for q in questions or []:
        if isinstance(q, Mapping):
            q = Question.from_dict(q)
        question_map[q.question_key] = q

    for modifier in pricing.price_modifiers or []:
        answer = answers.get(modifier.question_key)
        if answer is None:
            continue

        line = _apply_modifier(modifier, question_map.get(modifier.question_key), answer)
        if line is None:
            continue

        modifier_min += line.amount
        modifier_max += line.amount
        lines.append(line)

    return PriceResult(
        min=pricing.base_price_min + modifier_min,
        max=pricing.base_price_max + modifier_max,
        breakdown=PriceBreakdown(
            base_min=pricing.base_price_min,
            base_max=pricing.base_price_max,
            modifiers=lines,
        ),
    )
