from __future__ import annotations

from dataclasses import dataclass

from .environment import CheckEnvironment
from .model import CoverageReport, DeclarationNode
from .policy import KindPolicy, SpecialRule, policy_for
from .suppression import SuppressionStack


@dataclass(frozen=True)
class LintDef:
    lint_id: str
    category: str
    description: str


LINT = LintDef(
    "missing_docs_in_private_items",
    "restriction",
    "detects missing documentation for public and private members",
)


def _exempt(node: DeclarationNode, parent: DeclarationNode | None, policy: KindPolicy, env: CheckEnvironment) -> bool:
    if policy.rule == SpecialRule.ROOT_ENTRY_POINT:
        return env.root_entry_point(node, parent)
    if policy.rule == SpecialRule.TRAIT_IMPLEMENTATION:
        return env.trait_of(node, parent) is not None
    if policy.rule == SpecialRule.POSITIONAL_FIELD:
        return node.positional
    return False


class _CoverageRun:
    def __init__(self, env: CheckEnvironment, stack: SuppressionStack) -> None:
        self.env = env
        self.stack = stack
        self.enabled = not env.test_harness
        self.reports: list[CoverageReport] = []

    def visit(self, node: DeclarationNode, parent: DeclarationNode | None = None) -> None:
        with self.stack.scope(node.attributes) as hidden:
            self._check_node(node, parent, hidden)
            for child in node.children:
                self.visit(child, node)

    def _check_node(self, node: DeclarationNode, parent: DeclarationNode | None, hidden: bool) -> None:
        policy = policy_for(node.kind)
        if not policy.applicable or _exempt(node, parent, policy, self.env):
            return
        if not self.enabled or hidden or self.env.is_macro_expansion(node.span):
            return
        if not self.env.has_doc_comment(node):
            self.reports.append(CoverageReport(node.span, str(policy.label), node.name, LINT.lint_id))


def check(
    root: DeclarationNode,
    environment: CheckEnvironment | None = None,
    *,
    stack: SuppressionStack | None = None,
) -> list[CoverageReport]:
    """Walk ``root`` in source order and report every undocumented documentable node.

    Each call owns a fresh suppression stack built from
    ``environment.is_hidden_from_docs`` unless one is passed in. A passed-in
    stack keeps its own hidden predicate and is left at the depth it had on
    entry.

    Recursion follows tree depth, so trees nested deeper than the interpreter
    recursion limit (about a thousand levels) raise ``RecursionError``.
    """
    env = environment if environment is not None else CheckEnvironment()
    run = _CoverageRun(env, stack if stack is not None else SuppressionStack(env.is_hidden_from_docs))
    run.visit(root)
    return run.reports
