"""Keyword-based transaction categorization.

Categories are tested in declaration order and the first one with a keyword
contained in the description wins. A description such as "pizza delivery
refund" matches both Food & Dining and Income; it is Food & Dining because
that category is declared first. Keep the rules in a list, never a set.
"""
import logging
from typing import Optional

from .config import CategoryRules, load_category_rules
from .config.settings import CATEGORY_RULES_FILE
from .models import DEFAULT_CATEGORY

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY_RULES: CategoryRules = [
    ('Food & Dining', ('restaurant', 'food', 'cafe', 'pizza', 'burger', 'starbucks', 'mcdonald')),
    ('Shopping', ('amazon', 'walmart', 'target', 'shop', 'purchase')),
    ('Transportation', ('gas', 'fuel', 'uber', 'lyft', 'taxi', 'parking', 'metro')),
    ('Bills & Utilities', ('electric', 'water', 'internet', 'phone', 'cable', 'utility')),
    ('Healthcare', ('pharmacy', 'doctor', 'hospital', 'medical', 'health')),
    ('Entertainment', ('movie', 'netflix', 'spotify', 'game', 'entertainment')),
    ('Income', ('salary', 'payroll', 'deposit', 'transfer in', 'refund')),
]


class CategoryClassifier:
    """Maps free-text descriptions to a fixed set of category labels."""

    def __init__(self, rules: Optional[CategoryRules] = None, default: str = DEFAULT_CATEGORY):
        """
        Initialize classifier.

        Args:
            rules: Ordered (label, keywords) pairs; keywords must be lower case
            default: Label returned when nothing matches
        """
        self.rules = tuple(
            (label, tuple(keywords))
            for label, keywords in (rules if rules is not None else DEFAULT_CATEGORY_RULES)
        )
        self.default = default

    @property
    def labels(self) -> list:
        return [label for label, _ in self.rules] + [self.default]

    def classify(self, description: Optional[str]) -> str:
        """
        Return the category for a description.

        Never fails: empty or missing descriptions get the default label.
        """
        if not description:
            return self.default

        lowered = description.lower()
        for label, keywords in self.rules:
            if any(keyword in lowered for keyword in keywords):
                return label

        return self.default


_classifier: Optional[CategoryClassifier] = None


def get_classifier() -> CategoryClassifier:
    """
    Get the shared classifier, built from CATEGORY_RULES_FILE when set.

    ExtractionPipeline and the CLI call this on startup, so a broken rules
    file is reported there and never from inside a parser.

    Raises:
        ConfigurationError: If CATEGORY_RULES_FILE cannot be loaded
    """
    global _classifier
    if _classifier is None:
        if CATEGORY_RULES_FILE:
            _classifier = CategoryClassifier(load_category_rules(CATEGORY_RULES_FILE))
        else:
            _classifier = CategoryClassifier()
        logger.debug(f"Category classifier ready with {len(_classifier.rules)} rules")
    return _classifier


def classify(description: Optional[str]) -> str:
    """Categorize a description with the shared classifier."""
    return get_classifier().classify(description)
