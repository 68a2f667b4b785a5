"""Declaration-tree documents: JSON produced by a front-end, read into ``DeclarationNode``s."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from ..contracts.ids import TREE
from ..contracts.validate import validate, validate_file
from ..core.errors import ScriptError
from ..core.exit_codes import ERR_VALIDATION
from ..core.model import Attribute, DeclarationNode, NodeKind, Span


def _span_from_payload(raw: Mapping[str, Any] | None) -> Span:
    raw = raw or {}
    try:
        return Span(
            file=str(raw.get("file", "")),
            lo=int(raw.get("lo", 0)),
            hi=int(raw.get("hi", raw.get("lo", 0))),
            line=int(raw.get("line", 0)),
            column=int(raw.get("column", 0)),
            expansion=str(raw.get("expansion", "")),
        )
    except ValueError as exc:
        raise ScriptError(f"invalid span {dict(raw)}: {exc}", ERR_VALIDATION, "validation_error") from exc


def _attribute_from_payload(raw: Mapping[str, Any]) -> Attribute:
    return Attribute(name=str(raw["name"]), value=raw.get("value"), items=tuple(raw.get("items", ())))


def node_from_payload(raw: Mapping[str, Any]) -> DeclarationNode:
    return DeclarationNode(
        kind=NodeKind(raw["kind"]),
        name=str(raw.get("name", "")),
        span=_span_from_payload(raw.get("span")),
        attributes=tuple(_attribute_from_payload(attr) for attr in raw.get("attributes", ())),
        children=tuple(node_from_payload(child) for child in raw.get("children", ())),
        positional=bool(raw.get("positional", False)),
        def_id=str(raw.get("def_id", "")),
        trait_ref=raw.get("trait_ref"),
    )


def _node_payload(node: DeclarationNode) -> dict[str, Any]:
    payload: dict[str, Any] = {"kind": node.kind.value}
    if node.name:
        payload["name"] = node.name
    span = node.span
    payload["span"] = {"file": span.file, "lo": span.lo, "hi": span.hi, "line": span.line, "column": span.column}
    if span.expansion:
        payload["span"]["expansion"] = span.expansion
    if node.attributes:
        payload["attributes"] = [
            {"name": attr.name, **({"value": attr.value} if attr.value is not None else {}), **({"items": list(attr.items)} if attr.items else {})}
            for attr in node.attributes
        ]
    if node.children:
        payload["children"] = [_node_payload(child) for child in node.children]
    if node.positional:
        payload["positional"] = True
    if node.def_id:
        payload["def_id"] = node.def_id
    if node.trait_ref is not None:
        payload["trait_ref"] = node.trait_ref
    return payload


def tree_payload(root: DeclarationNode) -> dict[str, Any]:
    payload = {"schema_name": TREE, "schema_version": 1, "root": _node_payload(root)}
    validate(TREE, payload)
    return payload


def load_tree(path: str | Path) -> DeclarationNode:
    try:
        payload = validate_file(TREE, path)
        root = node_from_payload(payload["root"])
    except RecursionError as exc:
        raise ScriptError(f"{path}: declaration tree is nested too deeply to check", ERR_VALIDATION, "validation_error") from exc
    if root.kind != NodeKind.PROGRAM:
        raise ScriptError(f"{path}: tree root must be a `program` node, got `{root.kind}`", ERR_VALIDATION, "validation_error")
    return root
