"""Typed loader for `.review.yml`.

The file describes which review the comments come from; only reading it is
supported here.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

CONFIG_NAME = ".review.yml"
DEFAULT_COMMENTS_FILE = ".review_comments.yml"
DEFAULT_LOCAL_REPO = "./"
SUPPORTED_INTERFACES = {"github"}


class ConfigError(RuntimeError):
    """Data class for Config Error."""
    pass


@dataclass(frozen=True)
class ReviewConfig:
    """Data class for Review Config."""
    interface: str
    owner: str
    repo: str
    url: str
    id: int
    auth: str
    comments: str = DEFAULT_COMMENTS_FILE
    local_repo: str = DEFAULT_LOCAL_REPO
    trace: bool = False

    def comments_path(self, base_dir: Path) -> Path:
        """Comments file, relative paths taken from `base_dir`."""
        candidate = Path(self.comments).expanduser()
        if candidate.is_absolute():
            return candidate
        return base_dir / candidate


def _require_mapping(value: Any, ctx: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"{ctx}: expected mapping")
    return value


def _require_str(value: Any, ctx: str) -> str:
    if value is None:
        raise ConfigError(f"{ctx}: missing required key")
    if not isinstance(value, str):
        raise ConfigError(f"{ctx}: expected string")
    s = value.strip()
    if not s:
        raise ConfigError(f"{ctx}: must be non-empty")
    return s


def _optional_str(value: Any, ctx: str, default: str) -> str:
    if value is None:
        return default
    return _require_str(value, ctx)


def _require_positive_int(value: Any, ctx: str) -> int:
    if value is None:
        raise ConfigError(f"{ctx}: missing required key")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{ctx}: expected integer")
    if value < 1:
        raise ConfigError(f"{ctx}: must be >= 1")
    return value


def _require_bool(value: Any, ctx: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{ctx}: expected boolean")
    return value


def _load_yaml(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text())
    except FileNotFoundError:
        raise ConfigError(f"missing config file: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e


def load_review_config(path: Path) -> ReviewConfig:
    """Load review config."""
    cfg = _require_mapping(_load_yaml(path), "config")

    interface = _require_str(cfg.get("interface"), "config.interface").lower()
    if interface not in SUPPORTED_INTERFACES:
        raise ConfigError(
            f"config.interface: must be one of {sorted(SUPPORTED_INTERFACES)}"
        )

    return ReviewConfig(
        interface=interface,
        owner=_require_str(cfg.get("owner"), "config.owner"),
        repo=_require_str(cfg.get("repo"), "config.repo"),
        url=_require_str(cfg.get("url"), "config.url"),
        id=_require_positive_int(cfg.get("id"), "config.id"),
        auth=_require_str(cfg.get("auth"), "config.auth"),
        comments=_optional_str(cfg.get("comments"), "config.comments", DEFAULT_COMMENTS_FILE),
        local_repo=_optional_str(cfg.get("local_repo"), "config.local_repo", DEFAULT_LOCAL_REPO),
        trace=_require_bool(cfg.get("trace", False), "config.trace"),
    )
