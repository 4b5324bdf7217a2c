"""
Configuration Settings
======================

Configuration dataclasses holding the default options for each task.

Configuration never acts as ambient state: the host builds explicit option
records from it (query_options(), transform_options(), validation_options())
and passes them into every call.
"""

from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Any, Dict, List, Type
import json
import logging
import os

import yaml

from xml_tasks.query.models import QueryOptions, XmlNamespace, XPathVersion
from xml_tasks.transform.xslt import TransformOptions
from xml_tasks.validation.base import ValidationOptions
from xml_tasks.validation.xsd_validator import SCHEMA_CLASSES

logger = logging.getLogger(__name__)


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _normalize_version(section: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Turn a version parsed as a number (YAML 2.0, JSON 1.1) into its '2.0' form."""
    value = section.get(key)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        section[key] = f"{float(value):.1f}"
    return section


def _build_section(section_class: Type, data: Dict[str, Any], name: str):
    known = {f.name for f in fields(section_class)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown {name} setting(s): {', '.join(unknown)}")
    return section_class(**data)


@dataclass
class QueryConfig:
    """XPath query defaults."""

    xpath_version: str = XPathVersion.V3.value
    throw_error_on_empty_results: bool = False
    namespaces: Dict[str, str] = field(default_factory=dict)


@dataclass
class TransformConfig:
    """XSLT transform defaults. An empty newline means the platform line ending."""

    newline: str = ""


@dataclass
class ValidationConfig:
    """Schema validation defaults."""

    throw_on_validation_errors: bool = False
    xsd_version: str = "1.0"


@dataclass
class TasksConfig:
    """
    Complete task configuration.

    Example:
        config = TasksConfig()
        config.query.xpath_version = "2.0"
        config.validation.throw_on_validation_errors = True
        save_config(config, Path("xml-tasks.yaml"))
    """

    query: QueryConfig = field(default_factory=QueryConfig)
    transform: TransformConfig = field(default_factory=TransformConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)

    log_level: str = "INFO"

    # Custom extensions
    custom: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'query': asdict(self.query),
            'transform': asdict(self.transform),
            'validation': asdict(self.validation),
            'log_level': self.log_level,
            'custom': self.custom,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'TasksConfig':
        """
        Create from dictionary and validate the result.

        Versions written as YAML numbers (2.0, 1.1) are read as their
        string form.

        Raises:
            ValueError: If a section has unknown keys or a value is not accepted
        """
        config = cls()

        if 'query' in data:
            section = _normalize_version(dict(data['query']), 'xpath_version')
            config.query = _build_section(QueryConfig, section, 'query')
        if 'transform' in data:
            config.transform = _build_section(TransformConfig, data['transform'], 'transform')
        if 'validation' in data:
            section = _normalize_version(dict(data['validation']), 'xsd_version')
            config.validation = _build_section(ValidationConfig, section, 'validation')

        if 'log_level' in data:
            config.log_level = data['log_level']
        if 'custom' in data:
            config.custom = data['custom']

        config.validate()
        return config

    def validate(self) -> None:
        """
        Check the configured values against what the tasks accept.

        Raises:
            ValueError: Naming the first offending setting
        """
        versions = [version.value for version in XPathVersion]
        if self.query.xpath_version not in versions:
            raise ValueError(
                f"query.xpath_version must be one of {', '.join(versions)}, "
                f"got {self.query.xpath_version!r}"
            )
        for prefix, uri in self.query.namespaces.items():
            if not isinstance(prefix, str) or not isinstance(uri, str) or not uri:
                raise ValueError(
                    f"query.namespaces must map prefixes to non-empty URIs, "
                    f"got {prefix!r}: {uri!r}"
                )
        if self.validation.xsd_version not in SCHEMA_CLASSES:
            raise ValueError(
                f"validation.xsd_version must be one of {', '.join(SCHEMA_CLASSES)}, "
                f"got {self.validation.xsd_version!r}"
            )
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )

    def query_options(self) -> QueryOptions:
        """Build QueryOptions from the configured defaults."""
        namespaces: List[XmlNamespace] = [
            XmlNamespace(prefix, uri) for prefix, uri in self.query.namespaces.items()
        ]
        return QueryOptions(
            xml_namespaces=namespaces,
            xpath_version=XPathVersion(self.query.xpath_version),
            throw_error_on_empty_results=self.query.throw_error_on_empty_results,
        )

    def transform_options(self) -> TransformOptions:
        """Build TransformOptions from the configured defaults."""
        return TransformOptions(newline=self.transform.newline or os.linesep)

    def validation_options(self) -> ValidationOptions:
        """Build ValidationOptions from the configured defaults."""
        return ValidationOptions(
            throw_on_validation_errors=self.validation.throw_on_validation_errors,
            xsd_version=self.validation.xsd_version,
        )


def load_config(config_path: Path) -> TasksConfig:
    """
    Load configuration from file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config_path: Path to config file

    Returns:
        TasksConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is not supported or a setting is invalid
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, 'r', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            data = yaml.safe_load(f) or {}
        elif suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping of settings")

    logger.info(f"Loaded configuration from {config_path}")
    return TasksConfig.from_dict(data)


def save_config(config: TasksConfig, config_path: Path) -> None:
    """
    Save configuration to file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config: TasksConfig to save
        config_path: Path to save config file

    Raises:
        ValueError: If file format is not supported or a setting is invalid
    """
    suffix = config_path.suffix.lower()
    if suffix not in ['.json', '.yaml', '.yml']:
        raise ValueError(f"Unsupported config format: {suffix}")
    config.validate()
    data = config.to_dict()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        if suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Saved configuration to {config_path}")


def get_default_config() -> TasksConfig:
    """Get default configuration."""
    return TasksConfig()
