"""
Data models for the configurator engine.

Uses dataclasses for structured, type-safe data representation.
Records are built by the caller right before an evaluation and thrown
away afterwards; nothing here holds state between calls.
"""
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union


def is_number(value) -> bool:
    """True for plain ints/floats; booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _amount(value):
    """
    Read a cents amount, keeping numbers as given.

    Numeric strings are parsed; anything else raises ValueError.
    """
    if value is None:
        return 0
    if is_number(value):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return float(value)
    raise ValueError(f"Not an amount: {value!r}")


def _mappings(items):
    """Mapping entries of a stored list; other entries are dropped."""
    return [item for item in (items or []) if isinstance(item, Mapping)]


def _get(data: Mapping, *keys, default=None):
    """Read the first present key (stored rows mix camelCase and snake_case)."""
    for key in keys:
        if key in data:
            return data[key]
    return default


@dataclass
class VisibilityRule:
    """A single condition on a previously answered question."""
    question_key: str
    operator: str
    value: Any = None

    @classmethod
    def from_dict(cls, data: Mapping) -> 'VisibilityRule':
        return cls(
            question_key=_get(data, 'questionKey', 'question_key', default=''),
            operator=_get(data, 'operator', default=''),
            value=_get(data, 'value'),
        )

    def to_dict(self) -> dict:
        row = {'questionKey': self.question_key, 'operator': self.operator}
        if self.value is not None:
            row['value'] = self.value
        return row


@dataclass
class VisibilityConfig:
    """
    Declarative show/hide condition for a question or option.

    `logic` combines the rules ("all" = AND, "any" = OR), `action` decides
    whether a match reveals ("show") or hides ("hide") the target.
    """
    rules: list[VisibilityRule] = field(default_factory=list)
    logic: str = 'all'
    action: str = 'show'

    @classmethod
    def from_dict(cls, data: Mapping) -> 'VisibilityConfig':
        return cls(
            rules=[VisibilityRule.from_dict(r) for r in _mappings(data.get('rules'))],
            logic=data.get('logic') or 'all',
            action=data.get('action') or 'show',
        )

    @classmethod
    def coerce(cls, value) -> Optional['VisibilityConfig']:
        """Accept a config, a raw mapping or None."""
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        return None

    def to_dict(self) -> dict:
        return {
            'rules': [r.to_dict() for r in self.rules],
            'logic': self.logic,
            'action': self.action,
        }


@dataclass
class QuestionOption:
    """One selectable value of a select-type question."""
    value: str
    label: str
    visibility_rules: Optional[VisibilityConfig] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> 'QuestionOption':
        value = str(data.get('value', ''))
        return cls(
            value=value,
            label=data.get('label') or value,
            visibility_rules=VisibilityConfig.coerce(data.get('visibility_rules')),
        )

    def to_dict(self) -> dict:
        row = {'value': self.value, 'label': self.label}
        if self.visibility_rules is not None:
            row['visibility_rules'] = self.visibility_rules.to_dict()
        return row


@dataclass
class Question:
    """A single configurator question."""
    question_key: str
    label: str
    type: str
    options: list[QuestionOption] = field(default_factory=list)
    required: bool = False
    order_rank: int = 0
    product_slug: Optional[str] = None  # None = applies to all products
    visibility_rules: Optional[VisibilityConfig] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> 'Question':
        key = _get(data, 'question_key', 'questionKey', 'key', default='')
        return cls(
            question_key=key,
            label=data.get('label') or key,
            type=data.get('type', ''),
            options=[QuestionOption.from_dict(o) for o in _mappings(data.get('options'))],
            required=bool(data.get('required', False)),
            order_rank=int(data.get('order_rank') or 0),
            product_slug=data.get('product_slug'),
            visibility_rules=VisibilityConfig.coerce(data.get('visibility_rules')),
        )

    def find_option(self, value: str) -> Optional[QuestionOption]:
        """Return the option with the given value, if any."""
        for option in self.options:
            if option.value == value:
                return option
        return None

    def to_dict(self) -> dict:
        return {
            'question_key': self.question_key,
            'label': self.label,
            'type': self.type,
            'options': [o.to_dict() for o in self.options] or None,
            'required': self.required,
            'order_rank': self.order_rank,
            'product_slug': self.product_slug,
            'visibility_rules': self.visibility_rules.to_dict() if self.visibility_rules else None,
        }


@dataclass
class PriceModifier:
    """
    A signed cents amount keyed to a question/option pair.

    `option_value` doubles as the modifier kind: an exact option value,
    "*"/"any" for per-unit scaling of a number answer, or "area"/"m2" for
    per-square-meter scaling of a dimensions answer.
    """
    question_key: str
    option_value: str
    modifier: float

    @classmethod
    def from_dict(cls, data: Mapping) -> 'PriceModifier':
        return cls(
            question_key=_get(data, 'questionKey', 'question_key', default=''),
            option_value=str(_get(data, 'optionValue', 'option_value', default='')),
            modifier=_amount(data.get('modifier')),
        )

    def to_dict(self) -> dict:
        return {
            'questionKey': self.question_key,
            'optionValue': self.option_value,
            'modifier': self.modifier,
        }


@dataclass
class PricingDefinition:
    """Base price range plus conditional modifiers, all in cents."""
    base_price_min: int
    base_price_max: int
    price_modifiers: Optional[list[PriceModifier]] = None
    product_slug: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> 'PricingDefinition':
        modifiers = data.get('price_modifiers')
        return cls(
            base_price_min=_amount(data.get('base_price_min')),
            base_price_max=_amount(data.get('base_price_max')),
            price_modifiers=(
                [PriceModifier.from_dict(m) for m in _mappings(modifiers)]
                if modifiers is not None else None
            ),
            product_slug=data.get('product_slug'),
        )

    @classmethod
    def coerce(cls, value) -> Optional['PricingDefinition']:
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        return None

    def to_dict(self) -> dict:
        return {
            'product_slug': self.product_slug,
            'base_price_min': self.base_price_min,
            'base_price_max': self.base_price_max,
            'price_modifiers': (
                [m.to_dict() for m in self.price_modifiers]
                if self.price_modifiers is not None else None
            ),
        }


@dataclass
class ModifierLine:
    """A single applied modifier in a price breakdown."""
    label: str
    amount: float


@dataclass
class PriceBreakdown:
    base_min: int
    base_max: int
    modifiers: list[ModifierLine] = field(default_factory=list)


@dataclass
class PriceResult:
    """Complete result of a price estimate."""
    min: float
    max: float
    breakdown: PriceBreakdown

    @classmethod
    def zero(cls) -> 'PriceResult':
        """Result used when a product has no pricing at all."""
        return cls(min=0, max=0, breakdown=PriceBreakdown(base_min=0, base_max=0))

    def to_dict(self) -> dict:
        return {
            'min': self.min,
            'max': self.max,
            'breakdown': {
                'base_min': self.breakdown.base_min,
                'base_max': self.breakdown.base_max,
                'modifiers': [
                    {'label': m.label, 'amount': m.amount}
                    for m in self.breakdown.modifiers
                ],
            },
        }


# Answer shapes. The calculator dispatches on these instead of probing
# raw values; anything parse_answer cannot place is skipped.

@dataclass(frozen=True)
class StringAnswer:
    value: str


@dataclass(frozen=True)
class StringListAnswer:
    values: tuple


@dataclass(frozen=True)
class NumberAnswer:
    value: Union[int, float]


@dataclass(frozen=True)
class DimensionsAnswer:
    length: Union[int, float]
    width: Union[int, float]
    height: Optional[Union[int, float]] = None

    @property
    def area_m2(self) -> float:
        """Footprint in square meters (length and width are in cm)."""
        return (self.length * self.width) / 10000


Answer = Union[StringAnswer, StringListAnswer, NumberAnswer, DimensionsAnswer]


def parse_answer(raw) -> Optional[Answer]:
    """Classify a raw answer value, returning None for unknown shapes."""
    if isinstance(raw, str):
        return StringAnswer(raw)
    if isinstance(raw, (list, tuple)):
        return StringListAnswer(tuple(raw))
    if is_number(raw):
        return NumberAnswer(raw)
    if isinstance(raw, Mapping):
        length = raw.get('length')
        width = raw.get('width')
        if is_number(length) and is_number(width):
            height = raw.get('height')
            return DimensionsAnswer(length, width, height if is_number(height) else None)
    return None
