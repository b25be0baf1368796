"""Configuration management."""
from .settings import *
from .category_config_loader import CategoryRules, ConfigurationError, load_category_rules

__all__ = ['CategoryRules', 'ConfigurationError', 'load_category_rules']
