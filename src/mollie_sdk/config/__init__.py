from mollie_sdk.config.loader import (
    CONFIG_PATH_ENVS,
    default_config_candidates,
    load_config,
    parse_config_file,
    save_config,
)
from mollie_sdk.config.manager import ProfileManager
from mollie_sdk.config.models import ConfigInput, ProfileConfig, ResolvedConfig, SDKConfig

__all__ = [
    "CONFIG_PATH_ENVS",
    "ConfigInput",
    "ProfileConfig",
    "ProfileManager",
    "ResolvedConfig",
    "SDKConfig",
    "default_config_candidates",
    "load_config",
    "parse_config_file",
    "save_config",
]
