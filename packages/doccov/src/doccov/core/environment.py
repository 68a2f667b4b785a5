from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from .model import IMPL_MEMBER_KINDS, Attribute, DeclarationNode, NodeKind, Span
from .suppression import attributes_mark_hidden

ENTRY_POINT_NAME = "main"

DocPredicate = Callable[[DeclarationNode], bool]
HiddenPredicate = Callable[[Sequence[Attribute]], bool]
MacroPredicate = Callable[[Span], bool]
TraitQuery = Callable[[DeclarationNode], "str | None"]


def has_doc_attribute(node: DeclarationNode) -> bool:
    return any(attr.name == "doc" and attr.is_value_str for attr in node.attributes)


def span_from_expansion(span: Span) -> bool:
    return span.from_expansion


def declared_as_root_entry_point(node: DeclarationNode, parent: DeclarationNode | None) -> bool:
    if node.kind != NodeKind.FUNCTION or node.name != ENTRY_POINT_NAME:
        return False
    return parent is not None and parent.kind == NodeKind.PROGRAM


def enclosing_trait_of(member: DeclarationNode, parent: DeclarationNode | None) -> str | None:
    """Trait implemented by the ``impl`` block ``member`` is declared in, if any."""
    if member.kind not in IMPL_MEMBER_KINDS or parent is None or parent.kind != NodeKind.IMPL:
        return None
    return parent.trait_ref or None


@dataclass(frozen=True)
class CheckEnvironment:
    """Predicates and flags the coverage check consults while walking a tree.

    ``implemented_trait_of`` and ``is_root_entry_point`` are overrides for
    front-ends that resolve these semantically. Left as ``None``, the check
    answers both from the enclosing node at the point of the visit, so a node
    instance shared by several parents is judged separately under each.
    """

    has_doc_comment: DocPredicate = has_doc_attribute
    is_hidden_from_docs: HiddenPredicate = attributes_mark_hidden
    is_macro_expansion: MacroPredicate = span_from_expansion
    implemented_trait_of: TraitQuery | None = None
    is_root_entry_point: DocPredicate | None = None
    test_harness: bool = False

    def trait_of(self, member: DeclarationNode, parent: DeclarationNode | None) -> str | None:
        if self.implemented_trait_of is not None:
            return self.implemented_trait_of(member)
        return enclosing_trait_of(member, parent)

    def root_entry_point(self, node: DeclarationNode, parent: DeclarationNode | None) -> bool:
        if self.is_root_entry_point is not None:
            return bool(self.is_root_entry_point(node))
        return declared_as_root_entry_point(node, parent)
