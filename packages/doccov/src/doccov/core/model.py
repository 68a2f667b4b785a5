from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class NodeKind(str, Enum):
    PROGRAM = "program"
    CONSTANT = "constant"
    STATIC = "static"
    ENUM = "enum"
    STRUCT = "struct"
    UNION = "union"
    EXISTENTIAL_TYPE = "existential_type"
    FUNCTION = "function"
    MODULE = "module"
    TRAIT = "trait"
    TRAIT_ALIAS = "trait_alias"
    TYPE_ALIAS = "type_alias"
    EXTERN_BLOCK = "extern_block"
    EXTERN_CRATE = "extern_crate"
    GLOBAL_ASM = "global_asm"
    IMPORT = "import"
    IMPL = "impl"
    TRAIT_CONSTANT = "trait_constant"
    TRAIT_METHOD = "trait_method"
    TRAIT_TYPE = "trait_type"
    IMPL_CONSTANT = "impl_constant"
    IMPL_METHOD = "impl_method"
    IMPL_TYPE = "impl_type"
    IMPL_EXISTENTIAL_TYPE = "impl_existential_type"
    STRUCT_FIELD = "struct_field"
    VARIANT = "variant"

    def __str__(self) -> str:
        return self.value


IMPL_MEMBER_KINDS = frozenset(
    {
        NodeKind.IMPL_CONSTANT,
        NodeKind.IMPL_METHOD,
        NodeKind.IMPL_TYPE,
        NodeKind.IMPL_EXISTENTIAL_TYPE,
    }
)
TRAIT_MEMBER_KINDS = frozenset({NodeKind.TRAIT_CONSTANT, NodeKind.TRAIT_METHOD, NodeKind.TRAIT_TYPE})


@dataclass(frozen=True)
class Span:
    file: str = ""
    lo: int = 0
    hi: int = 0
    line: int = 0
    column: int = 0
    expansion: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "file", str(self.file).strip())
        object.__setattr__(self, "expansion", str(self.expansion or "").strip())
        if int(self.hi) < int(self.lo):
            raise ValueError(f"invalid span: hi={self.hi} precedes lo={self.lo}")

    @property
    def from_expansion(self) -> bool:
        return bool(self.expansion)


@dataclass(frozen=True)
class Attribute:
    """One attribute as written on a declaration.

    ``#[doc = "text"]`` is ``Attribute("doc", value="text")`` and
    ``#[doc(hidden)]`` is ``Attribute("doc", items=("hidden",))``.
    """

    name: str
    value: str | None = None
    items: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", str(self.name).strip())
        object.__setattr__(self, "items", tuple(str(item).strip() for item in self.items))

    @property
    def is_value_str(self) -> bool:
        return isinstance(self.value, str)


@dataclass(frozen=True)
class DeclarationNode:
    kind: NodeKind
    name: str = ""
    span: Span = field(default_factory=Span)
    attributes: tuple[Attribute, ...] = ()
    children: tuple["DeclarationNode", ...] = ()
    positional: bool = False
    def_id: str = ""
    trait_ref: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", NodeKind(self.kind))
        object.__setattr__(self, "attributes", tuple(self.attributes))
        object.__setattr__(self, "children", tuple(self.children))

    def walk(self) -> Iterator["DeclarationNode"]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass(frozen=True)
class CoverageReport:
    span: Span
    label: str
    node_name: str = ""
    lint: str = "missing_docs_in_private_items"

    @property
    def message(self) -> str:
        return f"missing documentation for {self.label}"
