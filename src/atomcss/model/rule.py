"""StyleRule model and selector escaping."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable

# Any ASCII punctuation except - and _ would end the class identifier.
_SELECTOR_SPECIAL_RE = re.compile(r"""([!"#$%&'()*+,./:;<=>?@\[\\\]^`{|}~])""")
_DIGITS = frozenset("0123456789")


def escape_selector(token: str) -> str:
    """Backslash-escape the selector metacharacters in a class token.

    A leading digit (``2xl:...``) is written as a hex escape, since an
    identifier cannot start with one.
    """
    escaped = _SELECTOR_SPECIAL_RE.sub(r"\\\1", token)
    if escaped[:1] in _DIGITS:
        escaped = f"\\3{escaped[0]} {escaped[1:]}"
    return escaped


def class_selector(token: str) -> str:
    """Return the escaped class selector (``.token``) for *token*."""
    return f".{escape_selector(token)}"


@dataclass(frozen=True)
class StyleRule:
    """A single compiled rule.

    A rule without ``media_query`` applies globally; otherwise it only applies
    inside that ``@media`` block.
    """

    selector: str
    declarations: str
    media_query: str | None = None

    def render(self, indent: str = "") -> str:
        return f"{indent}{self.selector} {{ {self.declarations} }}"

    # --- serialisation --------------------------------------------------------

    def to_dict(self) -> dict[str, str]:
        data = {"selector": self.selector, "declarations": self.declarations}
        if self.media_query:
            data["mediaQuery"] = self.media_query
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StyleRule:
        return cls(
            selector=data["selector"],
            declarations=data["declarations"],
            media_query=data.get("mediaQuery"),
        )


def render_rules(rules: Iterable[StyleRule]) -> str:
    """Serialize rules to CSS text.

    Global rules come first, one per line, in input order. Media rules are
    grouped into one ``@media`` block per query, blocks in first-seen order.
    """
    global_rules: list[StyleRule] = []
    media_groups: dict[str, list[StyleRule]] = {}
    for rule in rules:
        if rule.media_query:
            media_groups.setdefault(rule.media_query, []).append(rule)
        else:
            global_rules.append(rule)

    lines = [rule.render() for rule in global_rules]
    for media_query, grouped in media_groups.items():
        lines.append(f"@media {media_query} {{")
        lines.extend(rule.render(indent="  ") for rule in grouped)
        lines.append("}")
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
