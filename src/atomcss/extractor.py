"""Collect the class tokens used by a serialized component tree."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from atomcss.model.tokens import TokenSet

__all__ = ["extract_classes"]

logger = logging.getLogger(__name__)

# Checked in order; the first non-empty string wins per node, even if it is blank.
_CLASS_PROPS = ("className", "class")


def _class_attribute(props: Mapping[str, Any]) -> str | None:
    for key in _CLASS_PROPS:
        value = props.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def extract_classes(tree: Any) -> TokenSet:
    """Return every distinct class token in *tree*, in document order.

    Nodes are mappings shaped like ``{"type", "props", "children"}``; children
    are nodes or text. The walk uses an explicit stack, so depth is unbounded.
    """
    classes = TokenSet()
    stack: list[Any] = [tree]
    visited = 0
    while stack:
        node = stack.pop()
        if not isinstance(node, Mapping):
            continue
        visited += 1

        props = node.get("props")
        if isinstance(props, Mapping):
            attribute = _class_attribute(props)
            if attribute:
                for token in attribute.split():
                    classes.add(token)

        children = node.get("children")
        if isinstance(children, (list, tuple)):
            stack.extend(reversed(children))

    logger.debug("Extracted %d class token(s) from %d node(s)", len(classes), visited)
    return classes
