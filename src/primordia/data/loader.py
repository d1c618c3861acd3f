from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from importlib.resources import files as resource_files
from typing import Any, Dict, Optional

import yaml
from jsonschema import Draft7Validator

from ..errors import DataValidationError

logger = logging.getLogger(__name__)

_PKG = "primordia.data"


@lru_cache(maxsize=None)
def load_schema(name: str) -> Dict[str, Any]:
    """Return the bundled JSON schema ``<name>.schema.json``."""
    resource = resource_files(_PKG).joinpath(f"{name}.schema.json")
    if not resource.is_file():
        raise DataValidationError(f"Unknown schema: {name}")
    schema = json.loads(resource.read_text(encoding="utf-8"))
    Draft7Validator.check_schema(schema)
    logger.debug("Loaded schema '%s' (id=%s)", name, schema.get("$id"))
    return schema


def validate_data(data: Any, schema_name: str) -> None:
    validator = Draft7Validator(load_schema(schema_name))
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        raise DataValidationError(f"Validation failed for schema '{schema_name}'", errors)


def load_yaml_document(name: str, path: Optional[os.PathLike | str] = None) -> Any:
    """Load a YAML data document and validate it against its schema.

    If path is None, loads the embedded default resource ``primordia/data/<name>.yaml``.
    """
    if path is None:
        text = resource_files(_PKG).joinpath(f"{name}.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded %s resource", name)
    else:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        logger.debug("Loaded %s from path: %s", name, path)

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DataValidationError(f"Malformed YAML in {path or name}: {e}") from e
    if data is None:
        data = {}
    validate_data(data, name)
    return data


__all__ = ["load_schema", "validate_data", "load_yaml_document"]
