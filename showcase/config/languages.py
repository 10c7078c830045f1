from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

FALLBACK_COLOR = "#6c757d"
FALLBACK_LABEL = "N/A"

_DEVICON = "https://cdn.jsdelivr.net/gh/devicons/devicon/icons"

DEFAULT_COLORS: Dict[str, str] = {
    "Java": "#b07219",
    "Python": "#3572A5",
    "JavaScript": "#f1e05a",
    "TypeScript": "#3178c6",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "C": "#555555",
    "C++": "#f34b7d",
    "C#": "#178600",
    "PHP": "#4F5D95",
    "Swift": "#ffac45",
    "Kotlin": "#A97BFF",
    "Go": "#00ADD8",
    "Ruby": "#701516",
    "Shell": "#89e051",
}

DEFAULT_ICONS: Dict[str, str] = {
    "Java": f"{_DEVICON}/java/java-original.svg",
    "Python": f"{_DEVICON}/python/python-original.svg",
    "JavaScript": f"{_DEVICON}/javascript/javascript-original.svg",
    "TypeScript": f"{_DEVICON}/typescript/typescript-original.svg",
    "HTML": f"{_DEVICON}/html5/html5-original.svg",
    "CSS": f"{_DEVICON}/css3/css3-original.svg",
    "C": f"{_DEVICON}/c/c-original.svg",
    "C++": f"{_DEVICON}/cplusplus/cplusplus-original.svg",
    "C#": f"{_DEVICON}/csharp/csharp-original.svg",
    "PHP": f"{_DEVICON}/php/php-original.svg",
    "Swift": f"{_DEVICON}/swift/swift-original.svg",
    "Kotlin": f"{_DEVICON}/kotlin/kotlin-original.svg",
    "Go": f"{_DEVICON}/go/go-original.svg",
    "Ruby": f"{_DEVICON}/ruby/ruby-original.svg",
    "Shell": f"{_DEVICON}/bash/bash-original.svg",
}


@dataclass
class LanguageTable:
    """Display hints (color, icon) per language name.

    Lookups are exact-match on the language string. Unknown or missing
    languages get the neutral fallback color and no icon.
    """

    colors: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COLORS))
    icons: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ICONS))
    fallback_color: str = FALLBACK_COLOR

    def color_for(self, language: Optional[str]) -> str:
        if not language:
            return self.fallback_color
        return self.colors.get(language, self.fallback_color)

    def icon_for(self, language: Optional[str]) -> Optional[str]:
        if not language:
            return None
        return self.icons.get(language)


def _load_raw_table(path: Path) -> Dict:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_language_table(path: Path | None = None) -> LanguageTable:
    """Load the language display table.

    - Without ``path`` the built-in tables are used;
    - otherwise ``colors`` / ``icons`` / ``fallback_color`` from the JSON file
      are merged over the defaults. An unreadable file is logged and ignored.
    """

    table = LanguageTable()
    if path is None:
        return table

    try:
        raw = _load_raw_table(path)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Ignoring language table %s: %s", path, e)
        return table

    if not isinstance(raw, dict):
        logger.warning("Ignoring language table %s: expected a JSON object", path)
        return table

    colors = raw.get("colors") or {}
    icons = raw.get("icons") or {}
    if isinstance(colors, dict):
        table.colors.update({str(k): str(v) for k, v in colors.items()})
    if isinstance(icons, dict):
        table.icons.update({str(k): str(v) for k, v in icons.items()})
    fallback = raw.get("fallback_color")
    if isinstance(fallback, str) and fallback:
        table.fallback_color = fallback
    return table
