from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from mollie_sdk.config.loader import default_config_candidates, load_config, save_config
from mollie_sdk.config.models import ProfileConfig, SDKConfig
from mollie_sdk.errors import ConfigError


class ProfileManager:
    """Read and edit the named API profiles in the local config file.

    Without an explicit file the first existing default candidate is used, and
    new files are written to the first candidate.
    """

    def __init__(self, config_file: str | Path | None = None) -> None:
        self._pinned = config_file is not None
        self._path = Path(config_file or default_config_candidates()[0]).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> SDKConfig:
        resolved = load_config(config_path=self._path if self._pinned else None)
        if resolved.path is not None:
            self._path = resolved.path
        return resolved.data

    def save(self, config: SDKConfig) -> None:
        self._path = save_config(config, path=self._path)

    @contextmanager
    def _editing(self) -> Iterator[SDKConfig]:
        cfg = self.load()
        yield cfg
        self.save(cfg)

    def _require(self, cfg: SDKConfig, name: str) -> ProfileConfig:
        try:
            return cfg.profiles[name]
        except KeyError:
            raise ConfigError(
                f"profile '{name}' not found in {self._path}; run 'mollie configure --profile {name}'"
            ) from None

    def list_profiles(self) -> list[str]:
        return sorted(self.load().profiles)

    def get_profile(self, name: str | None = None) -> ProfileConfig:
        cfg = self.load()
        return self._require(cfg, name or cfg.default_profile or "default")

    def upsert_profile(self, name: str, profile: ProfileConfig, *, activate: bool = False) -> SDKConfig:
        """Add or replace ``name``; the first profile written becomes the default."""

        with self._editing() as cfg:
            cfg.profiles[name] = profile
            if activate or not cfg.default_profile:
                cfg.default_profile = name
        return cfg

    def set_default_profile(self, name: str) -> SDKConfig:
        with self._editing() as cfg:
            self._require(cfg, name)
            cfg.default_profile = name
        return cfg

    def delete_profile(self, name: str) -> SDKConfig:
        """Remove ``name``, handing the default to the next remaining profile."""

        with self._editing() as cfg:
            self._require(cfg, name)
            del cfg.profiles[name]
            if cfg.default_profile == name:
                cfg.default_profile = next(iter(sorted(cfg.profiles)), None)
        return cfg
