"""JSON-compatible dump of a parse result, for debugging and tooling."""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from typing import TYPE_CHECKING, Any

from simple_markdown.blocks import Heading
from simple_markdown.inline import Link, Replaced
from simple_markdown.parser import TextFragment

if TYPE_CHECKING:
    from collections.abc import Sequence

    from simple_markdown.emphasis import StyledRun
    from simple_markdown.parser import Node, Section


def _run_to_dict(run: StyledRun) -> dict[str, Any]:
    return {"text": run.text, "italic": run.style.italic, "bold": run.style.bold}


def _section_to_dict(section: Section) -> dict[str, Any]:
    block = section.block
    data: dict[str, Any] = {"type": type(block).__name__}
    data.update({f.name: getattr(block, f.name) for f in fields(block)})
    if "lines" in data:
        data["lines"] = list(data["lines"])
    if isinstance(block, Heading):
        data["font_size"] = block.font_size
    data["runs"] = [_run_to_dict(run) for run in section.runs]
    return data


def _value_to_dict(value: Any) -> Any:
    if isinstance(value, Link):
        return {"type": "Link", "label": value.label, "url": value.url}
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if is_dataclass(value) and not isinstance(value, type):
        return {"type": type(value).__name__} | {
            f.name: _value_to_dict(getattr(value, f.name)) for f in fields(value)
        }
    return repr(value)


def to_dict(node: Node) -> dict[str, Any]:
    """Convert one parse node to plain dicts, lists and scalars."""
    if isinstance(node, TextFragment):
        return {
            "type": "TextFragment",
            "text": node.text,
            "sections": [_section_to_dict(s) for s in node.sections],
        }
    if isinstance(node, Replaced):
        return {"type": "Replaced", "value": _value_to_dict(node.value)}
    msg = f"Not a parse node: {node!r}"
    raise TypeError(msg)


def to_json(nodes: Sequence[Node], *, indent: int | None = 2) -> str:
    """Serialize a parse result to JSON."""
    return json.dumps([to_dict(n) for n in nodes], indent=indent, ensure_ascii=False)
