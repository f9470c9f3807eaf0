"""Console rendering of parsed documents.

The outline lists one node per line, indented by depth::

    XML version=1.0, encoding=UTF-8
    + node
     + test, value=test, TEST<ads> ScriptingTEST
"""

from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from strict_xml_parser.tree.builder import XMLDocument, XMLNode


def describe_node(node: "XMLNode", indent: int = 0) -> str:
    """Outline ``node`` and its descendants, one line per node."""
    lines: List[str] = []
    stack: List[Tuple["XMLNode", int]] = [(node, indent)]
    while stack:
        current, depth = stack.pop()
        parts = [f"{' ' * depth}+ {current.name}"]
        parts.extend(f"{key}={value}" for key, value in sorted(current.attributes.items()))
        if current.value:
            parts.append(current.value)
        lines.append(", ".join(parts))
        stack.extend((child, depth + 1) for child in reversed(current.children))
    return "\n".join(lines)


def describe_document(document: "XMLDocument") -> str:
    """Outline a whole document, starting with its declaration."""
    header = [f"XML version={document.version}"]
    header.extend(f"{key}={value}" for key, value in sorted(document.attributes.items()))
    lines = [", ".join(header)]
    if document.root is not None:
        lines.append(describe_node(document.root))
    return "\n".join(lines)
