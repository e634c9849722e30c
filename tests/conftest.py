"""Shared fixtures for building apps/<name>/<version>/app.yml trees."""

from pathlib import Path
from typing import List, Optional

import pytest


def write_app_yaml(
    base_dir: Path,
    app_name: str,
    version: str,
    description: Optional[str],
    platforms: Optional[List[str]],
) -> Path:
    """Create <base_dir>/<app_name>/<version>/app.yml with the given keys."""
    app_dir = base_dir / app_name / version
    app_dir.mkdir(parents=True, exist_ok=True)

    lines = []
    if description is not None:
        lines.append(f"description: {description}")
    if platforms is not None:
        lines.append("platforms:")
        lines.extend(f"  {platform}:" for platform in platforms)

    app_yaml = app_dir / "app.yml"
    app_yaml.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return app_yaml


@pytest.fixture
def apps_dir(tmp_path: Path) -> Path:
    """The three-file tree used throughout: app1 with two versions, app2 with one."""
    root = tmp_path / "apps"
    root.mkdir()
    write_app_yaml(root, "app1", "v1.0", "Test app 1 description", ["darwin_arm64", "darwin_amd64"])
    write_app_yaml(root, "app1", "v2.0", "Test app 1 description", ["darwin_arm64"])
    write_app_yaml(root, "app2", "v1.0", "Test app 2 description", ["darwin_amd64"])
    return root
