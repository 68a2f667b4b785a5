from __future__ import annotations

from doccov.core.model import Attribute, DeclarationNode, NodeKind, Span

DOC = Attribute("doc", value="Documented.")
HIDDEN = Attribute("doc", items=("hidden",))


def node(
    kind: NodeKind,
    name: str = "",
    *children: DeclarationNode,
    documented: bool = False,
    hidden: bool = False,
    line: int = 1,
    expansion: str = "",
    positional: bool = False,
    def_id: str = "",
    trait_ref: str | None = None,
) -> DeclarationNode:
    attrs: list[Attribute] = []
    if documented:
        attrs.append(DOC)
    if hidden:
        attrs.append(HIDDEN)
    return DeclarationNode(
        kind=kind,
        name=name,
        span=Span(file="lib.rs", lo=line * 10, hi=line * 10 + 5, line=line, column=1, expansion=expansion),
        attributes=tuple(attrs),
        children=children,
        positional=positional,
        def_id=def_id,
        trait_ref=trait_ref,
    )


def program(*children: DeclarationNode, documented: bool = True, hidden: bool = False) -> DeclarationNode:
    return node(NodeKind.PROGRAM, "crate", *children, documented=documented, hidden=hidden, line=0)


def labels(reports) -> list[str]:
    return [report.label for report in reports]


def names(reports) -> list[str]:
    return [report.node_name for report in reports]
