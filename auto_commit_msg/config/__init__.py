"""Configuration Management Package"""

import json
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Mapping, Optional

ENV_PREFIX = "AUTO_COMMIT_MSG_"

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


class ConfigurationError(Exception):
    """Raised when a required setting is missing or invalid."""
    pass


@dataclass(frozen=True)
class Config:
    """Effective configuration. Built once at startup, then only read."""
    trace: bool = False
    base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai"
    api_key: str = "GEMINI_API_KEY"  # Name of the env var holding the secret
    short_model: str = "gemini-2.5-flash-lite"
    long_model: str = "gemini-2.5-flash"
    threshold: int = 200

    def to_dict(self) -> dict:
        return asdict(self)

    def validate(self) -> list[str]:
        """Return a list of problems; empty when the config is usable."""
        problems = []

        for name in ("base_url", "api_key", "short_model", "long_model"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                problems.append(f"'{name}' must be a non-empty string")

        if not isinstance(self.trace, bool):
            problems.append(f"'trace' must be true or false, got {self.trace!r}")

        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int) or self.threshold < 0:
            problems.append(f"'threshold' must be a non-negative integer, got {self.threshold!r}")

        return problems

    def resolve_secret(self, environ: Optional[Mapping[str, str]] = None) -> str:
        """Look up the API key in the environment variable named by api_key."""
        environ = os.environ if environ is None else environ
        return environ.get(self.api_key, "").strip()

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {raw!r}")


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"Invalid integer for {name}: {raw!r}")


class ConfigManager:
    """Merges defaults, a JSON config file and environment overrides."""

    CONFIG_FILENAME = ".auto-commit-msg.json"

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ
        self._config_path: Optional[Path] = None

    def load(self, path: Optional[Path] = None) -> Config:
        data = Config().to_dict()

        config_path = self._find_config_file(path)
        if config_path is not None:
            data.update(self._read_file(config_path))
            self._config_path = config_path

        data.update(self._read_environment())

        config = Config.from_dict(data)
        problems = config.validate()
        if problems:
            raise ConfigurationError("Invalid configuration:\n  " + "\n  ".join(problems))
        return config

    def _find_config_file(self, path: Optional[Path]) -> Optional[Path]:
        if path is not None:
            if not path.exists():
                raise ConfigurationError(f"Config file not found: {path}")
            return path

        local_path = Path.cwd() / self.CONFIG_FILENAME
        if local_path.exists():
            return local_path

        home_path = Path.home() / self.CONFIG_FILENAME
        if home_path.exists():
            return home_path

        return None

    def _read_file(self, path: Path) -> dict:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Could not parse {path}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Could not read {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a JSON object")
        return data

    def _read_environment(self) -> dict:
        overrides = {}
        for f in fields(Config):
            env_name = ENV_PREFIX + f.name.upper()
            raw = self.environ.get(env_name)
            if raw is None:
                continue
            if f.type is bool or f.type == 'bool':
                overrides[f.name] = _parse_bool(env_name, raw)
            elif f.type is int or f.type == 'int':
                overrides[f.name] = _parse_int(env_name, raw)
            else:
                overrides[f.name] = raw
        return overrides

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


def load_config(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> Config:
    return ConfigManager(environ).load(path)


__all__ = [
    "Config",
    "ConfigManager",
    "ConfigurationError",
    "load_config",
    "ENV_PREFIX",
]
