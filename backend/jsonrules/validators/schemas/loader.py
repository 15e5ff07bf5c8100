"""Schema loader: builds rule registries from YAML (or JSON) schema documents.

A schema document names itself and lists one rule per field:

    name: UserRegistration
    description: Schema for user registration validation
    rules:
      - field: username
        type: string
        required: true
        minLength: 3

Schema files in the configured directory are read once and cached by name.
"""

from pathlib import Path
from typing import Optional, Union

import structlog
import yaml
from pydantic import ValidationError

from jsonrules.config import get_settings
from jsonrules.validators.models import Rule
from jsonrules.validators.registry import RuleRegistry

logger = structlog.get_logger()

SCHEMA_SUFFIXES = (".yaml", ".yml", ".json")

# Cache loaded schema files to avoid re-reading from disk
_schema_cache: dict[str, RuleRegistry] = {}


class SchemaLoadError(ValueError):
    """A schema could not be read, parsed or turned into rules."""


def load_schema(text: str) -> RuleRegistry:
    """Build a registry from schema text.

    Args:
        text: YAML or JSON schema document

    Returns:
        RuleRegistry carrying the schema's name, description and rules

    Raises:
        SchemaLoadError: On YAML syntax errors or an invalid schema/rule
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"error parsing YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SchemaLoadError("invalid schema: top level must be a mapping")

    raw_rules = data.get("rules") or []
    if not isinstance(raw_rules, list):
        raise SchemaLoadError("invalid schema: 'rules' must be a list")

    rules = []
    for i, raw in enumerate(raw_rules):
        if not isinstance(raw, dict):
            raise SchemaLoadError(f"invalid schema: rule #{i + 1} must be a mapping")
        try:
            rules.append(Rule.model_validate(raw))
        except ValidationError as e:
            raise SchemaLoadError(
                f"invalid schema: rule #{i + 1} ({raw.get('field', '?')}): {e}"
            ) from e

    registry = RuleRegistry.from_rules(
        rules,
        name=str(data.get("name") or ""),
        description=str(data.get("description") or ""),
    )
    logger.info("schema_loaded", schema=registry.name, rules=len(registry))
    return registry


def load_schema_file(path: Union[str, Path]) -> RuleRegistry:
    """Read a schema file and build its registry.

    Raises:
        SchemaLoadError: If the file cannot be read or its content is invalid
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoadError(f"error reading schema file: {e}") from e
    return load_schema(text)


def _load_all_schemas() -> dict[str, RuleRegistry]:
    """Load and cache every schema file from the schema directory."""
    if _schema_cache:
        return _schema_cache

    schemas_dir = get_settings().SCHEMAS_DIR
    if not schemas_dir.is_dir():
        logger.warning("schemas_dir_missing", path=str(schemas_dir))
        return _schema_cache

    for schema_file in sorted(schemas_dir.iterdir()):
        if schema_file.suffix.lower() not in SCHEMA_SUFFIXES:
            continue
        try:
            registry = load_schema_file(schema_file)
        except SchemaLoadError as e:
            logger.warning("schema_file_skipped", path=str(schema_file), error=str(e))
            continue
        _schema_cache[registry.name or schema_file.stem] = registry

    return _schema_cache


def load_named_schema(name: str) -> Optional[RuleRegistry]:
    """Look up a schema from the schema directory by its name.

    Args:
        name: Schema name (e.g., "UserRegistration")

    Returns:
        A fresh copy of the cached RuleRegistry, safe to extend with
        add_rule, or None if not found
    """
    cached = _load_all_schemas().get(name)
    if cached is None:
        return None
    return RuleRegistry.from_rules(
        cached.all_rules(), name=cached.name, description=cached.description
    )


def get_all_schemas() -> list[str]:
    """List all available schema names."""
    return list(_load_all_schemas().keys())


def clear_schema_cache() -> None:
    """Forget cached schemas so the next lookup re-reads the directory."""
    _schema_cache.clear()
