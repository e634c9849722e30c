# === apps_chart/yaml_loader.py ===

import yaml
import logging
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)


class AppScanError(Exception):
    """Base error for anything that stops a scan of the apps directory."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class AppReadError(AppScanError):
    """A directory or app.yml could not be read."""


class AppParseError(AppScanError):
    """An app.yml is not valid YAML, or one of its known keys has the wrong shape."""


@dataclass
class AppFileData:
    description: str = ""
    platforms: List[str] = field(default_factory=list)


def load_app_file(file_path: str) -> AppFileData:
    """
    Loads one app.yml and pulls out the two keys we care about:
    `description` (a string) and `platforms` (a mapping; only its keys are kept).
    Raises AppReadError / AppParseError instead of skipping the file.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            raw_text = f.read()
    except OSError as e:
        raise AppReadError(file_path, f"could not open file: {e}") from e

    # BaseLoader keeps every scalar as the text written in the file
    # ("1.10" stays "1.10", "yes" stays "yes").
    try:
        data = yaml.load(raw_text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as ye:
        raise AppParseError(file_path, f"could not parse YAML: {ye}") from ye

    if data is None:
        logger.debug(f"Empty YAML document in '{file_path}'")
        return AppFileData()
    if not isinstance(data, dict):
        raise AppParseError(file_path, "top-level YAML node must be a mapping")

    return AppFileData(
        description=_read_description(data.get("description"), file_path),
        platforms=_read_platforms(data.get("platforms"), file_path),
    )


def _read_description(value, file_path: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise AppParseError(file_path, "`description` must be a string")
    return value


def _read_platforms(value, file_path: str) -> List[str]:
    # `platforms:` with nothing under it loads as ""
    if value is None or value == "":
        return []
    if not isinstance(value, dict):
        raise AppParseError(file_path, "`platforms` must be a mapping of platform ids")
    return list(value)
