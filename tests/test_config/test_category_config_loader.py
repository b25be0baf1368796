"""Tests for category rules loading."""
import pytest

from transaction_extractor.categorizer import CategoryClassifier
from transaction_extractor.config import ConfigurationError, load_category_rules


@pytest.fixture
def rules_file(tmp_path):
    path = tmp_path / "categories.yaml"
    path.write_text(
        "categories:\n"
        "  - name: Groceries\n"
        "    keywords: [Grocery, market]\n"
        "  - name: Shopping\n"
        "    keywords: [store]\n",
        encoding="utf-8",
    )
    return path


class TestLoadCategoryRules:
    """Test YAML rule loading."""

    def test_order_and_lowercase(self, rules_file):
        rules = load_category_rules(rules_file)

        assert rules == [
            ("Groceries", ("grocery", "market")),
            ("Shopping", ("store",)),
        ]

    def test_rules_drive_classifier(self, rules_file):
        classifier = CategoryClassifier(load_category_rules(rules_file))

        assert classifier.classify("Grocery Store") == "Groceries"
        assert classifier.classify("Hardware Store") == "Shopping"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_category_rules(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("categories: [unclosed", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_category_rules(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "shape.yaml"
        path.write_text("Food: [pizza]\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="categories"):
            load_category_rules(path)

    def test_entry_without_name(self, tmp_path):
        path = tmp_path / "noname.yaml"
        path.write_text("categories:\n  - keywords: [pizza]\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="no name"):
            load_category_rules(path)
