"""Load category keyword rules from YAML."""
import logging
from pathlib import Path
from typing import List, Tuple, Union

import yaml

logger = logging.getLogger(__name__)

CategoryRules = List[Tuple[str, Tuple[str, ...]]]


class ConfigurationError(Exception):
    """Raised when a configuration file is missing or malformed."""
    pass


def load_category_rules(path: Union[str, Path]) -> CategoryRules:
    """
    Load ordered category rules from a YAML file.

    Expected layout (order is significant, first match wins):

        categories:
          - name: Food & Dining
            keywords: [restaurant, pizza]
          - name: Shopping
            keywords: [amazon]

    Args:
        path: Path to the YAML file

    Returns:
        List of (label, keywords) pairs in file order

    Raises:
        ConfigurationError: If the file cannot be read or has the wrong shape
    """
    path = Path(path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load category rules from {path}: {e}")
        raise ConfigurationError(f"Cannot load category rules from {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get('categories'), list):
        raise ConfigurationError(f"{path}: expected a top-level 'categories' list")

    rules: CategoryRules = []
    for index, entry in enumerate(data['categories']):
        if not isinstance(entry, dict) or not entry.get('name'):
            raise ConfigurationError(f"{path}: category #{index + 1} has no name")

        keywords = entry.get('keywords') or []
        if not isinstance(keywords, list):
            raise ConfigurationError(f"{path}: keywords for '{entry['name']}' must be a list")

        # Matching is done against lower-cased text
        rules.append((str(entry['name']), tuple(str(k).lower() for k in keywords)))

    logger.info(f"Loaded {len(rules)} category rules from {path.name}")
    return rules
