import os
from typing import Any, Dict, Mapping, Optional

import logbook
import yaml

logger = logbook.Logger(__name__)

ROOT_DIR = os.path.abspath(os.path.dirname(__file__))
DEFAULTS_PATH = os.path.join(ROOT_DIR, "defaults.yml")
CONFIG_KEY_PREFIX = "ERROR_PAGES_"


def _load_yaml(yaml_path: str) -> Dict[str, Any]:
    with open(yaml_path) as yaml_file:
        return yaml.safe_load(yaml_file) or {}


def load_config(app_config: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Builds the error pages configuration.

    Packaged defaults are overridden by the *.yml files in
    $ERROR_PAGES_CONFIG_DIRECTORY (in name order), which are in turn
    overridden by the ERROR_PAGES_* keys of `app_config`.
    """
    configs = [DEFAULTS_PATH]

    conf_d_path = os.environ.get("ERROR_PAGES_CONFIG_DIRECTORY")
    if conf_d_path and os.path.isdir(conf_d_path):
        configs.extend(
            sorted(
                os.path.join(conf_d_path, x)
                for x in os.listdir(conf_d_path)
                if x.endswith(".yml")
            )
        )

    config: Dict[str, Any] = {}
    for yaml_path in configs:
        if os.path.isfile(yaml_path):
            logger.debug("Loading error pages config from {}", yaml_path)
            config.update(_load_yaml(yaml_path))

    if app_config is not None:
        config.update(
            (key, value) for key, value in app_config.items() if key.startswith(CONFIG_KEY_PREFIX)
        )

    return config
