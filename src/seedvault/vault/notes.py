"""Reading and writing markdown notes with YAML frontmatter."""

import re
from typing import Any

import yaml

FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*\n?", re.DOTALL)


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split a note into its frontmatter mapping and body.

    Raises yaml.YAMLError if the frontmatter block is not valid YAML.
    """
    fm_match = FRONTMATTER_RE.match(text)
    if not fm_match:
        return {}, text

    fm = yaml.safe_load(fm_match.group(1)) or {}
    if not isinstance(fm, dict):
        return {}, text
    return fm, text[fm_match.end():]


def render_frontmatter(data: dict[str, Any]) -> str:
    """Render YAML frontmatter block."""
    fm = yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"---\n{fm}---\n"


def render_note(frontmatter: dict[str, Any], body: str) -> str:
    return render_frontmatter(frontmatter) + body
