"""Schema files: YAML/JSON rule sets loaded into rule registries."""

from jsonrules.validators.schemas.loader import (
    SchemaLoadError,
    clear_schema_cache,
    get_all_schemas,
    load_named_schema,
    load_schema,
    load_schema_file,
)

__all__ = [
    "SchemaLoadError",
    "clear_schema_cache",
    "get_all_schemas",
    "load_named_schema",
    "load_schema",
    "load_schema_file",
]
