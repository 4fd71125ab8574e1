"""Validator configuration.

The defaults reproduce the annotation grammar ``kind:value;kind:value`` read
from the ``"validate"`` key of dataclass field metadata. A configuration can
also be built from a dictionary or loaded from a YAML or JSON file:

    ```yaml
    datavalidator:
      tag: check
      clause_separator: "|"
    ```
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_SECTION = "datavalidator"


@dataclass(frozen=True)
class ValidatorConfig:
    """Settings shared by the parser and the record validator.

    Attributes:
        tag: Field metadata key holding the annotation string
        clause_separator: Separates clauses within an annotation
        pair_separator: Separates a constraint kind from its value
        list_separator: Separates the elements of an ``in`` value
        root_name: Violation name used when the root value is not a record
    """

    tag: str = "validate"
    clause_separator: str = ";"
    pair_separator: str = ":"
    list_separator: str = ","
    root_name: str = "Main"

    def __post_init__(self) -> None:
        for name in ("tag", "clause_separator", "pair_separator", "list_separator", "root_name"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(
                    f"Configuration value '{name}' must be a non-empty string",
                    context={"key": name, "value": value},
                )

        separators = (self.clause_separator, self.pair_separator, self.list_separator)
        if len(set(separators)) != len(separators):
            raise ConfigurationError(
                "Separators must be distinct",
                context={
                    "clause_separator": self.clause_separator,
                    "pair_separator": self.pair_separator,
                    "list_separator": self.list_separator,
                },
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ValidatorConfig:
        """Create a configuration from a dictionary.

        Args:
            data: Mapping of setting names to values. Missing keys keep
                their defaults.

        Returns:
            ValidatorConfig instance

        Raises:
            ConfigurationError: If the mapping has unknown keys or bad values
        """
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                context={"unknown": unknown, "known": sorted(known)},
            )
        return cls(**data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> ValidatorConfig:
        """Load a configuration from a YAML or JSON file.

        The settings may sit at the top level of the file or under a
        ``datavalidator`` section.

        Args:
            path: Path to a ``.yaml``, ``.yml`` or ``.json`` file

        Returns:
            ValidatorConfig instance

        Raises:
            ConfigurationError: If the file is missing, has an unsupported
                suffix, or holds invalid settings
        """
        path = Path(path).resolve()
        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {path}", context={"path": str(path)}
            )

        suffix = path.suffix.lower()
        with open(path) as f:
            if suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f)
            elif suffix == ".json":
                data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported file format: {suffix}", context={"path": str(path)}
                )

        data = data or {}
        if isinstance(data, dict) and CONFIG_SECTION in data:
            data = data[CONFIG_SECTION] or {}

        logger.debug(f"Loaded validator configuration from {path}")
        return cls.from_dict(data)


DEFAULT_CONFIG = ValidatorConfig()
