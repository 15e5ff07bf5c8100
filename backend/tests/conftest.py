"""Shared pytest fixtures: the rule sets of the user, product and API examples."""

import pytest
import structlog

from jsonrules.config import get_settings
from jsonrules.validators import Rule, RuleKind, RuleRegistry
from jsonrules.validators.schemas import clear_schema_cache

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Settings, schema cache and structlog config are process-wide; isolate tests."""
    get_settings.cache_clear()
    clear_schema_cache()
    yield
    get_settings.cache_clear()
    clear_schema_cache()
    structlog.reset_defaults()


@pytest.fixture
def user_registry() -> RuleRegistry:
    """User registration rules, built programmatically."""
    registry = RuleRegistry(name="UserRegistration")
    registry.add_rule(Rule(
        field_name="username",
        kind=RuleKind.STRING,
        required=True,
        min_length=3,
        max_length=20,
        pattern="^[a-zA-Z0-9_]+$",
        description="Username for the account",
    ))
    registry.add_rule(Rule(
        field_name="email",
        kind=RuleKind.STRING,
        required=True,
        pattern=EMAIL_PATTERN,
    ))
    registry.add_rule(Rule(
        field_name="age", kind=RuleKind.INTEGER, required=True, min=18, max=120
    ))
    registry.add_rule(Rule(
        field_name="password",
        kind=RuleKind.STRING,
        required=True,
        min_length=8,
        max_length=100,
    ))
    registry.add_rule(Rule(
        field_name="country",
        kind=RuleKind.STRING,
        enum=["USA", "Canada", "Mexico", "UK", "Germany", "France"],
    ))
    return registry


@pytest.fixture
def product_registry() -> RuleRegistry:
    """Product rules without the id/name fields."""
    return RuleRegistry.from_rules(
        [
            Rule(field_name="price", kind=RuleKind.NUMBER, required=True, min=0.01, max=999999.99),
            Rule(field_name="stock", kind=RuleKind.INTEGER, required=True, min=0),
            Rule(
                field_name="category",
                kind=RuleKind.STRING,
                required=True,
                enum=["Electronics", "Clothing", "Food", "Books", "Sports"],
            ),
        ],
        name="Product",
    )


@pytest.fixture
def api_registry() -> RuleRegistry:
    """API configuration rules."""
    return RuleRegistry.from_rules(
        [
            Rule(field_name="endpoint", kind=RuleKind.STRING, required=True, pattern="^https?://.*"),
            Rule(field_name="timeout", kind=RuleKind.INTEGER, min=1, max=300),
            Rule(field_name="methods", kind=RuleKind.ARRAY, required=True),
        ],
        name="APIConfiguration",
    )
