from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Literal
import yaml


SUPPORTED_ELEMENT_TYPES = ["int", "float", "str"]
ElementType = Literal["int", "float", "str"]

SUPPORTED_OUTPUT_FORMATS = ["list", "lines"]
OutputFormat = Literal["list", "lines"]

SUPPORTED_LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

ELEMENT_PARSERS = {"int": int, "float": float, "str": str}

LOGGER = logging.getLogger(__name__)


def default_config_path() -> Path:
    default = Path.home() / ".config" / "ordset" / "config.yaml"
    return Path(os.environ.get("ORDSET_CONFIG", default))


@dataclass
class OrdsetConfig:
    element_type: ElementType = "int"
    separator: str = ","
    output_format: OutputFormat = "list"
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.element_type not in SUPPORTED_ELEMENT_TYPES:
            raise ValueError(f"element_type must be in {SUPPORTED_ELEMENT_TYPES}")
        if self.output_format not in SUPPORTED_OUTPUT_FORMATS:
            raise ValueError(f"output_format must be in {SUPPORTED_OUTPUT_FORMATS}")
        if not self.separator:
            raise ValueError("separator must not be empty")
        self.log_level = self.log_level.upper()
        if self.log_level not in SUPPORTED_LOG_LEVELS:
            raise ValueError(f"log_level must be in {SUPPORTED_LOG_LEVELS}")

    @property
    def parse_element(self):
        return ELEMENT_PARSERS[self.element_type]

    @classmethod
    def from_yaml(cls, fileobj) -> "OrdsetConfig":
        data = yaml.safe_load(fileobj) or {}

        def get(name, default):
            return data.get(name.replace("_", "-"), data.get(name, default))

        return cls(
            element_type=get("element_type", cls.element_type),
            separator=str(get("separator", cls.separator)),
            output_format=get("output_format", cls.output_format),
            log_level=str(get("log_level", cls.log_level)),
        )

    @classmethod
    def load(cls, path) -> "OrdsetConfig":
        """Read the config file at ``path``; a missing file raises ``FileNotFoundError``."""
        with open(path) as f:
            config = cls.from_yaml(f)
        LOGGER.debug(f"Loaded configuration from {path}")
        return config
