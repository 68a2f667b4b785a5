from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .model import NodeKind


class SpecialRule(str, Enum):
    NONE = "none"
    ROOT_ENTRY_POINT = "root_entry_point"
    TRAIT_IMPLEMENTATION = "trait_implementation"
    POSITIONAL_FIELD = "positional_field"


@dataclass(frozen=True)
class KindPolicy:
    label: str | None
    rule: SpecialRule = SpecialRule.NONE

    @property
    def applicable(self) -> bool:
        return self.label is not None


_SKIP = KindPolicy(None)

POLICY_TABLE: dict[NodeKind, KindPolicy] = {
    NodeKind.PROGRAM: KindPolicy("the program"),
    NodeKind.CONSTANT: KindPolicy("a constant"),
    NodeKind.STATIC: KindPolicy("a static"),
    NodeKind.ENUM: KindPolicy("an enum"),
    NodeKind.STRUCT: KindPolicy("a struct"),
    NodeKind.UNION: KindPolicy("a union"),
    NodeKind.EXISTENTIAL_TYPE: KindPolicy("an existential type"),
    NodeKind.FUNCTION: KindPolicy("a function", SpecialRule.ROOT_ENTRY_POINT),
    NodeKind.MODULE: KindPolicy("a module"),
    NodeKind.TRAIT: KindPolicy("a trait"),
    NodeKind.TRAIT_ALIAS: KindPolicy("a trait alias"),
    NodeKind.TYPE_ALIAS: KindPolicy("a type alias"),
    NodeKind.EXTERN_BLOCK: _SKIP,
    NodeKind.EXTERN_CRATE: _SKIP,
    NodeKind.GLOBAL_ASM: _SKIP,
    NodeKind.IMPORT: _SKIP,
    NodeKind.IMPL: _SKIP,
    NodeKind.TRAIT_CONSTANT: KindPolicy("an associated constant"),
    NodeKind.TRAIT_METHOD: KindPolicy("a trait method"),
    NodeKind.TRAIT_TYPE: KindPolicy("an associated type"),
    NodeKind.IMPL_CONSTANT: KindPolicy("an associated constant", SpecialRule.TRAIT_IMPLEMENTATION),
    NodeKind.IMPL_METHOD: KindPolicy("a method", SpecialRule.TRAIT_IMPLEMENTATION),
    NodeKind.IMPL_TYPE: KindPolicy("an associated type", SpecialRule.TRAIT_IMPLEMENTATION),
    NodeKind.IMPL_EXISTENTIAL_TYPE: KindPolicy("an existential type", SpecialRule.TRAIT_IMPLEMENTATION),
    NodeKind.STRUCT_FIELD: KindPolicy("a struct field", SpecialRule.POSITIONAL_FIELD),
    NodeKind.VARIANT: KindPolicy("a variant"),
}


def policy_for(kind: NodeKind) -> KindPolicy:
    return POLICY_TABLE[NodeKind(kind)]
