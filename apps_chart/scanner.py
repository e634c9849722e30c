# === apps_chart/scanner.py ===

import os
import logging
from typing import List

from apps_chart.file_discovery import discover_app_files
from apps_chart.models import App, AppRegistry, Version
from apps_chart.yaml_loader import load_app_file

logger = logging.getLogger(__name__)

def scan_apps(root_dir: str) -> List[App]:
    """
    Scans root_dir for <app>/<version>/app.yml files and groups them into App
    records keyed by app name. Returns the apps sorted by name; versions keep
    the order in which the walk found them.

    The first AppReadError / AppParseError aborts the whole scan.
    """
    root_dir = os.path.normpath(root_dir)
    logger.info(f"Scanning `{root_dir}` for app.yml files …")

    registry = AppRegistry()
    file_count = 0
    for location in discover_app_files(root_dir):
        logger.debug(f"  Loading {location.path} (app={location.app_name}, version={location.version_name})")
        data = load_app_file(location.path)
        version = Version(name=location.version_name, platforms=data.platforms)
        registry.add_version(location.app_name, data.description, version)
        file_count += 1

    apps = registry.sorted_apps()
    logger.info(f"  → Found {file_count} app.yml file(s) across {len(apps)} app(s).")
    return apps
