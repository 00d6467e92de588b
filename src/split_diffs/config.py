"""Loading the rendering config from the environment."""

import os
import shutil
from collections.abc import Mapping

from dotenv import load_dotenv
from pydantic import ValidationError

from split_diffs.exceptions import ConfigError
from split_diffs.models import Config
from split_diffs.models.config_models import (
    DEFAULT_LINE_NUMBER_WIDTH,
    DEFAULT_LINE_PREFIX_WIDTH,
    DEFAULT_MIN_LINE_WIDTH,
)

ENV_PREFIX = "SPLIT_DIFFS_"
DEFAULT_SCREEN_WIDTH = 80

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


def _read_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")


def load_config(
    screen_width: int | None = None,
    env: Mapping[str, str] | None = None,
) -> Config:
    """Build a Config from ``SPLIT_DIFFS_*`` settings.

    Args:
        screen_width: Explicit screen width; wins over the environment and
            the terminal size.
        env: Settings to read. Defaults to ``os.environ`` after loading any
            ``.env`` file.

    Raises:
        ConfigError: If a setting can't be parsed or is out of range.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    if screen_width is None:
        terminal_width = shutil.get_terminal_size((DEFAULT_SCREEN_WIDTH, 24)).columns
        screen_width = _read_int(env, "SCREEN_WIDTH", terminal_width)

    try:
        return Config(
            screen_width=screen_width,
            line_number_width=_read_int(env, "LINE_NUMBER_WIDTH", DEFAULT_LINE_NUMBER_WIDTH),
            line_prefix_width=_read_int(env, "LINE_PREFIX_WIDTH", DEFAULT_LINE_PREFIX_WIDTH),
            min_line_width=_read_int(env, "MIN_LINE_WIDTH", DEFAULT_MIN_LINE_WIDTH),
            wrap_lines=_read_bool(env, "WRAP_LINES", True),
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid split-diffs config: {exc}") from exc
