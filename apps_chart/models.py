# === apps_chart/models.py ===

import logging
from dataclasses import dataclass, field
from typing import List, Dict, Optional

logger = logging.getLogger(__name__)

@dataclass
class Version:
    """
    One release of an app: the directory holding an app.yml, plus the
    platform ids listed under its `platforms` key (document order).
    """
    name: str
    platforms: List[str] = field(default_factory=list)

@dataclass
class App:
    """
    An app as found under <root>/<name>/<version>/app.yml.
    The description comes from the first app.yml seen for this name.
    """
    name: str
    description: str
    versions: List[Version] = field(default_factory=list)

@dataclass
class AppRegistry:
    """
    Holds every App discovered during a scan, keyed by app name.
    """
    apps: Dict[str, App] = field(default_factory=dict)

    def add_version(self, app_name: str, description: str, version: Version) -> App:
        app = self.apps.get(app_name)
        if app is None:
            app = App(name=app_name, description=description, versions=[version])
            self.apps[app_name] = app
            return app

        if description != app.description:
            logger.warning(
                f"App '{app_name}' version '{version.name}' has a different description; "
                f"keeping the first one seen."
            )
        app.versions.append(version)
        return app

    def find_by_name(self, name: str) -> Optional[App]:
        return self.apps.get(name)

    def sorted_apps(self) -> List[App]:
        return sorted(self.apps.values(), key=lambda app: app.name)
