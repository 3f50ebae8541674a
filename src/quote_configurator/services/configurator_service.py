"""
Configurator Service - Question/pricing lookup with default fallback.

Reads per-site records from <data_dir>/<site_slug>.json and falls back to
the static default tables when a site has no rows for a product.
"""
import json
import logging
from typing import Mapping, Optional

from ..config.defaults import get_default_pricing, get_default_questions
from ..config.settings import Settings, get_settings
from ..engine.models import PriceResult, PricingDefinition, Question
from ..engine.price_calculator import calculate_price
from ..engine.visibility import visible_questions

logger = logging.getLogger(__name__)

SOURCE_DATABASE = 'database'
SOURCE_DEFAULT = 'default'


class SiteRecordStore:
    """
    Read-only JSON record store, one file per site.

    File layout:
        {"questions": [...question rows...], "pricing": [...pricing rows...]}
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    def load(self, site_slug: str) -> dict:
        """Load a site's records; a missing or unreadable file yields no rows."""
        path = self.settings.site_file(site_slug)
        if not path.exists():
            return {}
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read records for site %s from %s: %s", site_slug, path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring records for site %s: expected an object in %s", site_slug, path)
            return {}
        return data

    def question_rows(self, site_slug: str) -> list[dict]:
        return [r for r in self.load(site_slug).get('questions') or [] if isinstance(r, Mapping)]

    def pricing_rows(self, site_slug: str) -> list[dict]:
        return [r for r in self.load(site_slug).get('pricing') or [] if isinstance(r, Mapping)]


def _parse_row(parse, row: Mapping, site_slug: str):
    """Build a record from a stored row, or None (logged) if the row is malformed."""
    try:
        return parse(row)
    except (TypeError, ValueError) as e:
        logger.warning("Skipping malformed record on site %s: %s (%r)", site_slug, e, row)
        return None


class ConfiguratorService:
    """Resolves questions and pricing for a product and runs estimates."""

    def __init__(self, settings: Optional[Settings] = None, store: Optional[SiteRecordStore] = None):
        self.settings = settings or get_settings()
        self.store = store or SiteRecordStore(self.settings)

    def _site(self, site_slug: Optional[str]) -> str:
        return site_slug or self.settings.default_site

    def get_questions(self, product_slug: Optional[str], site_slug: Optional[str] = None) -> tuple[list[Question], str]:
        """
        Questions for a product: shared ones (no product_slug) plus its own.

        Returns (questions, source) where source is "database" or "default".
        """
        site = self._site(site_slug)
        questions = []
        for row in self.store.question_rows(site):
            if row.get('product_slug') not in (None, product_slug):
                continue
            question = _parse_row(Question.from_dict, row, site)
            if question is not None:
                questions.append(question)

        if questions:
            questions.sort(key=lambda q: q.order_rank)
            return questions, SOURCE_DATABASE

        logger.info("No stored questions for %s on site %s, using defaults", product_slug, site)
        return get_default_questions(product_slug), SOURCE_DEFAULT

    def get_pricing(self, product_slug: str, site_slug: Optional[str] = None) -> tuple[Optional[PricingDefinition], Optional[str]]:
        """
        Pricing for a product.

        Returns (pricing, source), or (None, None) when neither the site
        records nor the default table know the product.
        """
        site = self._site(site_slug)
        for row in self.store.pricing_rows(site):
            if row.get('product_slug') != product_slug:
                continue
            pricing = _parse_row(PricingDefinition.from_dict, row, site)
            if pricing is not None:
                return pricing, SOURCE_DATABASE

        pricing = get_default_pricing(product_slug)
        if pricing is not None:
            logger.info("No stored pricing for %s on site %s, using defaults", product_slug, site)
            return pricing, SOURCE_DEFAULT
        return None, None

    def estimate(
        self,
        product_slug: str,
        answers: Mapping,
        site_slug: Optional[str] = None,
        only_visible: bool = False,
    ) -> PriceResult:
        """
        Price estimate for a product given the collected answers.

        With only_visible, answers to questions that are currently hidden
        are dropped before pricing.
        """
        pricing, _ = self.get_pricing(product_slug, site_slug)
        questions, _ = self.get_questions(product_slug, site_slug)

        if pricing is None:
            logger.info("No pricing for %s, returning zero estimate", product_slug)
            return PriceResult.zero()

        if only_visible:
            answers = self.filter_hidden_answers(questions, answers)

        return calculate_price(pricing, questions, answers)

    @staticmethod
    def filter_hidden_answers(questions: list[Question], answers: Mapping) -> dict:
        """
        Drop answers to known questions that are not currently visible.

        Visibility is re-evaluated against the remaining answers until it
        settles, so a stale answer to a hidden question cannot keep a
        dependent question visible.
        """
        known = {q.question_key for q in questions}
        kept = dict(answers)
        # Bounded so rules that flip each other back and forth still terminate
        for _ in range(len(questions) + 1):
            shown = {q.question_key for q in visible_questions(questions, kept)}
            remaining = {k: v for k, v in answers.items() if k not in known or k in shown}
            if remaining.keys() == kept.keys():
                break
            kept = remaining
        return kept
