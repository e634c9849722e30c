# === apps_chart/report_generator.py ===

import io
import os
from typing import Dict, List

from apps_chart.models import App
from apps_chart.scanner import scan_apps

APP_EMOJI = "🖥️"
VERSIONS_SUMMARY = "📦 Versions"
VERSION_EMOJI = "🏷️"

# Handed out in order, one per new platform id.
PLATFORM_EMOJI_PALETTE = ("🍎", "🍏", "🐧", "🪟", "🤖", "🍊", "🍋", "🍇")
FALLBACK_PLATFORM_EMOJI = "💻"

class PlatformEmojis:
    """
    Platform id → emoji for a single rendered document. The first time an id
    shows up it takes the next unused palette glyph; once the palette runs out,
    every new id gets the fallback glyph. An id keeps its glyph across apps.
    """

    def __init__(self, palette=PLATFORM_EMOJI_PALETTE, fallback: str = FALLBACK_PLATFORM_EMOJI):
        self.palette = tuple(palette)
        self.fallback = fallback
        self.assigned: Dict[str, str] = {}
        self._next = 0

    def emoji_for(self, platform: str) -> str:
        emoji = self.assigned.get(platform)
        if emoji is not None:
            return emoji
        if self._next < len(self.palette):
            emoji = self.palette[self._next]
            self._next += 1
        else:
            emoji = self.fallback
        self.assigned[platform] = emoji
        return emoji

def generate_markdown(apps: List[App]) -> str:
    """
    Render apps (already sorted) as markdown: a heading per app, its description
    in small light-blue text, then a collapsible list of versions with their platforms.
    """
    emojis = PlatformEmojis()
    md = io.StringIO()
    for app in apps:
        md.write(f"## {APP_EMOJI} {app.name}\n")
        # HTML for the smaller, light-blue description
        md.write(f"<small style=\"color:lightblue;\">{app.description}</small>\n")
        md.write("<details>\n")
        md.write(f"<summary>{VERSIONS_SUMMARY}</summary>\n")
        md.write("<ul>\n")
        for version in app.versions:
            md.write(f"<li>{VERSION_EMOJI} {version.name}\n")
            md.write("<ul>\n")
            for platform in version.platforms:
                md.write(f"<li>{emojis.emoji_for(platform)} {platform}</li>\n")
            md.write("</ul>\n")
            md.write("</li>\n")
        md.write("</ul>\n")
        md.write("</details>\n")
        md.write("\n")
    return md.getvalue()

def generate_apps_markdown(root_dir: str) -> str:
    """
    Scan root_dir and render the result. Scan errors propagate unchanged.
    """
    return generate_markdown(scan_apps(root_dir))

def write_markdown_report(markdown: str, out_path: str):
    """
    Write the rendered markdown to out_path (UTF-8), creating parent folders.
    """
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as md:
        md.write(markdown)
