# === apps_chart/file_discovery.py ===

import os
from dataclasses import dataclass
from typing import Iterator

from apps_chart.yaml_loader import AppReadError

APP_FILE_NAME = "app.yml"

@dataclass(frozen=True)
class AppFileLocation:
    path: str
    app_name: str
    version_name: str

def _raise_read_error(err: OSError):
    raise AppReadError(err.filename or "", f"could not read directory: {err.strerror or err}") from err

def discover_app_files(root_dir: str) -> Iterator[AppFileLocation]:
    """
    Walks root_dir recursively and yields every file named exactly "app.yml",
    together with its version (parent folder) and app name (grandparent folder).
    Unreadable directories abort the walk with AppReadError.
    """
    for dirpath, dirnames, filenames in os.walk(root_dir, onerror=_raise_read_error):
        if APP_FILE_NAME not in filenames:
            continue
        file_path = os.path.join(dirpath, APP_FILE_NAME)
        version_dir = os.path.abspath(dirpath)
        yield AppFileLocation(
            path=file_path,
            app_name=os.path.basename(os.path.dirname(version_dir)),
            version_name=os.path.basename(version_dir),
        )
