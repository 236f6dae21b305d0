"""YAML loader for reader defaults."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..utils.unstructured import optional_mapping
from .schema import StandardDefaults

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load a YAML file and build ``StandardDefaults`` from it.

    Expected layout::

        defaults:
          text: "n/a"
          integer: 0
          boolean: false

    An empty file yields the standard defaults.
    """

    @staticmethod
    def load_yaml(config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load YAML file into dictionary.

        Args:
            config_path: Path to YAML config file

        Returns:
            Configuration dictionary (empty for an empty file)

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid YAML or its top level is not a mapping
        """
        path = Path(config_path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML parse error in {path}: {exc}") from exc

        try:
            return dict(optional_mapping(config, context=f"{path} top level"))
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @staticmethod
    def load_defaults(
        config_path: Union[str, Path], env_prefix: Optional[str] = None
    ) -> StandardDefaults:
        """Load the ``defaults`` section of a YAML file.

        Args:
            config_path: Path to YAML config file
            env_prefix: When given, environment variables with this prefix are
                applied on top of the file (see ``StandardDefaults.with_env_overrides``)
        """
        config = ConfigLoader.load_yaml(config_path)
        defaults = StandardDefaults.from_mapping(config.get("defaults"))
        if env_prefix is not None:
            defaults = defaults.with_env_overrides(prefix=env_prefix)
        logger.info("Loaded reader defaults from %s", config_path)
        return defaults
