"""
Print the visible questions and price estimate for a product.

Usage:
    python scripts/debug_estimate.py carports '{"car_count": "2", "storage": "small"}' [site]
"""
import json
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from quote_configurator.engine import format_price, format_price_range, visible_questions
from quote_configurator.services.configurator_service import ConfiguratorService


def debug(product_slug: str, answers: dict, site: str = None):
    service = ConfiguratorService()

    questions, source = service.get_questions(product_slug, site)
    print(f"Questions ({source}):")
    shown = {q.question_key for q in visible_questions(questions, answers)}
    for q in questions:
        marker = "✓" if q.question_key in shown else "✗"
        print(f"  {marker} {q.question_key:<12} {q.label} = {answers.get(q.question_key)!r}")

    pricing, source = service.get_pricing(product_slug, site)
    if pricing is None:
        print("\nNo pricing configured")
        return
    print(f"\nBase price ({source}): {format_price_range(pricing.base_price_min, pricing.base_price_max)}")

    result = service.estimate(product_slug, answers, site)
    for line in result.breakdown.modifiers:
        print(f"  → {line.label}: {format_price(line.amount)}")
    print(f"\nEstimate: {format_price_range(result.min, result.max)}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)
    answers = json.loads(sys.argv[2]) if len(sys.argv) > 2 else {}
    debug(sys.argv[1], answers, sys.argv[3] if len(sys.argv) > 3 else None)
