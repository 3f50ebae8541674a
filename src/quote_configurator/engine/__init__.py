"""Engine subpackage - visibility rules and price estimation."""
from .formatting import format_price, format_price_range
from .models import PriceResult, PricingDefinition, Question, VisibilityConfig
from .price_calculator import calculate_price
from .visibility import is_visible, visible_options, visible_questions

__all__ = [
    'calculate_price', 'is_visible', 'visible_questions', 'visible_options',
    'format_price', 'format_price_range',
    'Question', 'VisibilityConfig', 'PricingDefinition', 'PriceResult',
]
