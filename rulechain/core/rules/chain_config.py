"""
Chain configuration management.

Builds ValidationChain trees from YAML files or plain mappings.
"""

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from rulechain.core.models import ValueRange
from rulechain.core.validators import ValidatorConfigError, ValidatorRegistry
from rulechain.observability.logger import get_logger

from .validation_chain import ValidationChain

logger = get_logger(__name__)

RANGE_PARAMS = ("length", "in", "not_in")
CHAIN_OPTIONS = ("continue_on_failure", "if_present", "if_absent", "items")


class ChainConfigLoader:
    """
    Loads a validation chain from a YAML configuration file.

    Expected YAML format:
    ```yaml
    chain:
      continue_on_failure: true
      items:
        - validate: Presence
          attributes: [username]
        - validate: Length
          attributes: [username]
          params:
            length: {min: 4, max: 10}
        - validate: Inclusion
          attributes: [role]
          params:
            in: [admin, editor, viewer]
        - chain:
            if_present: email
            items:
              - validate: Format
                attributes: [email]
                params:
                  format: email
              - validate: Format
                attributes: [email]
                params:
                  format: {pattern: "@example\\.com$", ignore_case: true}
    ```
    """

    def __init__(self, config_path: str | Path, registry: ValidatorRegistry | None = None):
        """
        Initialize the chain config loader.

        Args:
            config_path: Path to the YAML configuration file
            registry: Registry to resolve validator names in (default registry if None)
        """
        self.config_path = Path(config_path)
        self.registry = registry
        if not self.config_path.exists():
            raise FileNotFoundError(f"Chain configuration file not found: {config_path}")

    def load_chain(self) -> ValidationChain:
        """
        Load and build the validation chain from the YAML file.

        Returns:
            The root ValidationChain

        Raises:
            ValidatorConfigError: If the YAML is invalid or describes an invalid chain
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValidatorConfigError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(config, Mapping) or "chain" not in config:
            raise ValidatorConfigError("Configuration file must contain a 'chain' section")

        chain = build_chain(config["chain"], registry=self.registry)
        summary = chain.get_summary()
        logger.info(
            f"Loaded validation chain from {self.config_path}",
            extra={
                "config_path": str(self.config_path),
                "total_validations": summary["total_validations"],
                "total_chains": summary["total_chains"],
            },
        )
        return chain


def build_chain(
    config: Mapping[str, Any] | None,
    registry: ValidatorRegistry | None = None,
    path: str = "chain",
) -> ValidationChain:
    """
    Build a ValidationChain from a chain mapping.

    Args:
        config: Chain definition (continue_on_failure, if_present, if_absent, items)
        registry: Registry to resolve validator names in
        path: Location of this chain in the document, for error messages

    Returns:
        The built ValidationChain

    Raises:
        ValidatorConfigError: If the definition is invalid
    """
    config = config or {}
    if not isinstance(config, Mapping):
        raise ValidatorConfigError(f"'{path}' must be a mapping, {type(config).__name__} given")

    unknown = set(config) - set(CHAIN_OPTIONS)
    if unknown:
        raise ValidatorConfigError(f"Unknown option(s) in '{path}': {', '.join(sorted(unknown))}")

    continue_on_failure = config.get("continue_on_failure", False)
    if not isinstance(continue_on_failure, bool):
        raise ValidatorConfigError(
            f"'{path}.continue_on_failure' must be true or false, {type(continue_on_failure).__name__} given"
        )

    items = config.get("items") or []
    if not isinstance(items, list):
        raise ValidatorConfigError(f"'{path}.items' must be a list")

    chain = ValidationChain(
        continue_on_failure=continue_on_failure,
        if_present=config.get("if_present"),
        if_absent=config.get("if_absent"),
        registry=registry,
    )

    for idx, item in enumerate(items):
        item_path = f"{path}.items[{idx}]"
        if not isinstance(item, Mapping):
            raise ValidatorConfigError(f"'{item_path}' must be a mapping")

        if "validate" in item:
            _add_validation(chain, item, item_path)
        elif "chain" in item:
            chain.add(build_chain(item["chain"], registry=registry, path=f"{item_path}.chain"))
        else:
            raise ValidatorConfigError(f"'{item_path}' must define either 'validate' or 'chain'")

    return chain


def _add_validation(chain: ValidationChain, item: Mapping[str, Any], path: str) -> None:
    validator_name = item["validate"]

    attributes = item.get("attributes", item.get("attribute"))
    if attributes is None:
        raise ValidatorConfigError(f"'{path}' is missing 'attributes'")
    if isinstance(attributes, str):
        attributes = [attributes]

    params = item.get("params", item.get("parameters")) or {}
    if not isinstance(params, Mapping):
        raise ValidatorConfigError(f"'{path}.params' must be a mapping")

    try:
        chain.validate(validator_name, *attributes, parse_params(params))
    except ValidatorConfigError as e:
        raise ValidatorConfigError(f"Invalid validation at '{path}': {e}") from e


def parse_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """
    Convert YAML parameter values into the types validators expect.

    - {min, max} mappings under length / in / not_in become ValueRange
    - lists under in / not_in become tuples
    - {pattern, ignore_case} under format becomes a compiled Pattern

    Raises:
        ValidatorConfigError: If a range or pattern is malformed
    """
    parsed = dict(params)

    for key in RANGE_PARAMS:
        value = parsed.get(key)
        if isinstance(value, Mapping):
            if set(value) != {"min", "max"}:
                raise ValidatorConfigError(f"Range parameter '{key}' must define exactly 'min' and 'max'")
            try:
                parsed[key] = ValueRange(min=value["min"], max=value["max"])
            except PydanticValidationError as e:
                raise ValidatorConfigError(f"Invalid range for '{key}': {e}")
        elif isinstance(value, list):
            parsed[key] = tuple(value)

    fmt = parsed.get("format")
    if isinstance(fmt, Mapping):
        if "pattern" not in fmt:
            raise ValidatorConfigError("Custom 'format' parameter requires a 'pattern'")
        flags = re.IGNORECASE if fmt.get("ignore_case") else 0
        try:
            parsed["format"] = re.compile(fmt["pattern"], flags)
        except re.error as e:
            raise ValidatorConfigError(f"Invalid regex pattern: {e}")

    return parsed
