"""Configuration loading for blockdash.

Loads settings from TOML config files with sensible defaults.
Search order: --config path → ~/.config/blockdash/config.toml → defaults.
"""

from __future__ import annotations

import copy
import sys
import tomllib
from pathlib import Path
from typing import Any, NoReturn

DEFAULT_CONFIG: dict[str, Any] = {
    "title": "Blocks without borders",
    "margin": 4,
    "spacing": 1,
    "panel_spacing": 2,
    "mouse_capture": False,
    "gradients": {
        "cpu": "plasma",
        "gpu": "plasma",
        "memory": "blues",
    },
    "logging": {
        "level": "WARNING",
    },
}

# Layout keys that must be non-negative integers
_CELL_KEYS = ("margin", "spacing", "panel_spacing")

_DEFAULT_PATH = Path.home() / ".config" / "blockdash" / "config.toml"


def _deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Merge overlay into base. Nested dicts are merged at the first level only."""
    merged = copy.deepcopy(base)
    for key, value in overlay.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def _fail(message: str, source: Path) -> NoReturn:
    print(f"blockdash: {message} in {source}", file=sys.stderr)
    raise SystemExit(1)


def _validate(config: dict[str, Any], source: Path) -> None:
    for key in _CELL_KEYS:
        value = config.get(key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            _fail(f"{key} must be a non-negative integer", source)
    seed = config.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        _fail("seed must be an integer", source)
    if not isinstance(config.get("title"), str):
        _fail("title must be a string", source)
    if not isinstance(config.get("mouse_capture"), bool):
        _fail("mouse_capture must be true or false", source)

    gradients = config.get("gradients")
    if not isinstance(gradients, dict):
        _fail("[gradients] must be a table", source)
    for panel, preset in gradients.items():
        if not isinstance(preset, str):
            _fail(f"gradients.{panel} must be a preset name", source)

    logging_cfg = config.get("logging")
    if not isinstance(logging_cfg, dict):
        _fail("[logging] must be a table", source)
    log_file = logging_cfg.get("file")
    if log_file is not None and not isinstance(log_file, str):
        _fail("logging.file must be a path string", source)


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration, merging user TOML over defaults.

    Args:
        path: Explicit config file path (from --config). If None, tries the
              default location ~/.config/blockdash/config.toml.

    Returns:
        Merged configuration dict.

    Raises:
        SystemExit: If an explicit path doesn't exist, can't be parsed, or
            holds out-of-range or mistyped values.
    """
    if path is not None:
        if not path.is_file():
            print(f"blockdash: config file not found: {path}", file=sys.stderr)
            raise SystemExit(1)
        try:
            user_config = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            print(f"blockdash: invalid TOML in {path}: {e}", file=sys.stderr)
            raise SystemExit(1) from e
        merged = _deep_merge(DEFAULT_CONFIG, user_config)
        _validate(merged, path)
        return merged

    # Try default location silently
    if _DEFAULT_PATH.is_file():
        try:
            user_config = tomllib.loads(_DEFAULT_PATH.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError:
            print(
                f"blockdash: warning: ignoring invalid TOML in {_DEFAULT_PATH}",
                file=sys.stderr,
            )
        else:
            merged = _deep_merge(DEFAULT_CONFIG, user_config)
            _validate(merged, _DEFAULT_PATH)
            return merged

    return copy.deepcopy(DEFAULT_CONFIG)


def dump_default_config() -> str:
    """Return the default configuration as a TOML string."""
    lines = [
        "# blockdash configuration",
        "# Place this file at ~/.config/blockdash/config.toml",
        "",
        f'title = "{DEFAULT_CONFIG["title"]}"',
        f"margin = {DEFAULT_CONFIG['margin']}",
        f"spacing = {DEFAULT_CONFIG['spacing']}",
        f"panel_spacing = {DEFAULT_CONFIG['panel_spacing']}",
        f"mouse_capture = {str(DEFAULT_CONFIG['mouse_capture']).lower()}",
        "# seed = 42",
        "",
        "[gradients]",
    ]
    for panel, preset in DEFAULT_CONFIG["gradients"].items():
        lines.append(f'{panel} = "{preset}"')
    lines.append("")

    lines.append("[logging]")
    lines.append(f'level = "{DEFAULT_CONFIG["logging"]["level"]}"')
    lines.append('# file = "/tmp/blockdash.log"')

    return "\n".join(lines) + "\n"
