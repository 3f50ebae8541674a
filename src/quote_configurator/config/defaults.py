"""
Default configurator questions and pricing.

Used as fallback when a site has no questions/pricing records for a product.
Amounts are in cents.
"""
from typing import Optional

from ..engine.models import PricingDefinition, Question


DEFAULT_COMMON_QUESTIONS = [
    {
        'question_key': 'style',
        'label': 'Stijl',
        'type': 'single-select',
        'options': [
            {'value': 'modern', 'label': 'Modern'},
            {'value': 'klassiek', 'label': 'Klassiek'},
            {'value': 'landelijk', 'label': 'Landelijk'},
            {'value': 'cottage', 'label': 'Cottage'},
        ],
        'required': True,
        'order_rank': 10,
        'product_slug': None,
    },
    {
        'question_key': 'material',
        'label': 'Materiaal',
        'type': 'single-select',
        'options': [
            {'value': 'eik', 'label': 'Eik'},
            {'value': 'beuk', 'label': 'Beuk'},
            {'value': 'thermowood', 'label': 'Thermowood'},
        ],
        'required': True,
        'order_rank': 20,
        'product_slug': None,
    },
]

DEFAULT_PRODUCT_QUESTIONS = {
    'poolhouses': [
        {'question_key': 'length', 'label': 'Lengte (m)', 'type': 'number',
         'required': True, 'order_rank': 5, 'product_slug': 'poolhouses'},
        {'question_key': 'width', 'label': 'Breedte (m)', 'type': 'number',
         'required': True, 'order_rank': 6, 'product_slug': 'poolhouses'},
        {
            'question_key': 'features',
            'label': 'Extra opties',
            'type': 'multi-select',
            'options': [
                {'value': 'kitchen', 'label': 'Buitenkeuken'},
                {'value': 'shower', 'label': 'Douche'},
                {'value': 'toilet', 'label': 'Toilet'},
                {'value': 'heating', 'label': 'Verwarming'},
            ],
            'required': False,
            'order_rank': 30,
            'product_slug': 'poolhouses',
        },
    ],
    'carports': [
        {
            'question_key': 'car_count',
            'label': 'Aantal wagens',
            'type': 'single-select',
            'options': [
                {'value': '1', 'label': '1 wagen'},
                {'value': '2', 'label': '2 wagens'},
                {'value': '3', 'label': '3 wagens'},
            ],
            'required': True,
            'order_rank': 5,
            'product_slug': 'carports',
        },
        {
            'question_key': 'storage',
            'label': 'Berging',
            'type': 'single-select',
            'options': [
                {'value': 'none', 'label': 'Geen berging'},
                {'value': 'small', 'label': 'Kleine berging'},
                {'value': 'large', 'label': 'Grote berging'},
            ],
            'required': True,
            'order_rank': 25,
            'product_slug': 'carports',
        },
    ],
    'poorten': [
        {
            'question_key': 'gate_type',
            'label': 'Type poort',
            'type': 'single-select',
            'options': [
                {'value': 'swing', 'label': 'Draaipoort'},
                {'value': 'sliding', 'label': 'Schuifpoort'},
            ],
            'required': True,
            'order_rank': 5,
            'product_slug': 'poorten',
        },
        {
            'question_key': 'automation',
            'label': 'Automatisering',
            'type': 'single-select',
            'options': [
                {'value': 'manual', 'label': 'Manueel'},
                {'value': 'motorized', 'label': 'Gemotoriseerd'},
            ],
            'required': True,
            'order_rank': 25,
            'product_slug': 'poorten',
        },
    ],
    'guesthouse': [
        {'question_key': 'length', 'label': 'Lengte (m)', 'type': 'number',
         'required': True, 'order_rank': 5, 'product_slug': 'guesthouse'},
        {'question_key': 'width', 'label': 'Breedte (m)', 'type': 'number',
         'required': True, 'order_rank': 6, 'product_slug': 'guesthouse'},
        {
            'question_key': 'bedrooms',
            'label': 'Aantal slaapkamers',
            'type': 'single-select',
            'options': [
                {'value': '1', 'label': '1 slaapkamer'},
                {'value': '2', 'label': '2 slaapkamers'},
            ],
            'required': True,
            'order_rank': 25,
            'product_slug': 'guesthouse',
        },
        {
            'question_key': 'bathroom',
            'label': 'Badkamer',
            'type': 'single-select',
            'options': [
                {'value': 'none', 'label': 'Geen badkamer'},
                {'value': 'shower', 'label': 'Douchekamer'},
                {'value': 'full', 'label': 'Volledige badkamer'},
            ],
            'required': True,
            'order_rank': 30,
            'product_slug': 'guesthouse',
        },
    ],
}

DEFAULT_PRICING = {
    'poolhouses': {
        'product_slug': 'poolhouses',
        'base_price_min': 3500000,  # €35.000
        'base_price_max': 7500000,  # €75.000
        'price_modifiers': [
            {'questionKey': 'material', 'optionValue': 'eik', 'modifier': 0},
            {'questionKey': 'material', 'optionValue': 'beuk', 'modifier': -500000},
            {'questionKey': 'material', 'optionValue': 'thermowood', 'modifier': 200000},
            {'questionKey': 'features', 'optionValue': 'kitchen', 'modifier': 800000},
            {'questionKey': 'features', 'optionValue': 'shower', 'modifier': 350000},
            {'questionKey': 'features', 'optionValue': 'toilet', 'modifier': 250000},
            {'questionKey': 'features', 'optionValue': 'heating', 'modifier': 400000},
        ],
    },
    'carports': {
        'product_slug': 'carports',
        'base_price_min': 1500000,  # €15.000
        'base_price_max': 3500000,  # €35.000
        'price_modifiers': [
            {'questionKey': 'car_count', 'optionValue': '2', 'modifier': 500000},
            {'questionKey': 'car_count', 'optionValue': '3', 'modifier': 1000000},
            {'questionKey': 'storage', 'optionValue': 'small', 'modifier': 300000},
            {'questionKey': 'storage', 'optionValue': 'large', 'modifier': 600000},
        ],
    },
    'poorten': {
        'product_slug': 'poorten',
        'base_price_min': 800000,  # €8.000
        'base_price_max': 2000000,  # €20.000
        'price_modifiers': [
            {'questionKey': 'gate_type', 'optionValue': 'sliding', 'modifier': 200000},
            {'questionKey': 'automation', 'optionValue': 'motorized', 'modifier': 350000},
        ],
    },
    'guesthouse': {
        'product_slug': 'guesthouse',
        'base_price_min': 5000000,  # €50.000
        'base_price_max': 12000000,  # €120.000
        'price_modifiers': [
            {'questionKey': 'bedrooms', 'optionValue': '2', 'modifier': 800000},
            {'questionKey': 'bathroom', 'optionValue': 'shower', 'modifier': 500000},
            {'questionKey': 'bathroom', 'optionValue': 'full', 'modifier': 900000},
        ],
    },
}


def get_default_questions(product_slug: Optional[str]) -> list[Question]:
    """Common questions plus product-specific ones, sorted by order_rank."""
    rows = list(DEFAULT_COMMON_QUESTIONS)
    if product_slug and product_slug in DEFAULT_PRODUCT_QUESTIONS:
        rows = DEFAULT_PRODUCT_QUESTIONS[product_slug] + rows
        rows.sort(key=lambda r: r['order_rank'])
    return [Question.from_dict(r) for r in rows]


def get_default_pricing(product_slug: str) -> Optional[PricingDefinition]:
    """Default pricing for a product, or None if it has none."""
    row = DEFAULT_PRICING.get(product_slug)
    if row is None:
        return None
    return PricingDefinition.from_dict(row)
