"""Documentation coverage core: declaration model, suppression tracking and the coverage visitor."""

from __future__ import annotations

from .environment import CheckEnvironment
from .model import Attribute, CoverageReport, DeclarationNode, NodeKind, Span
from .suppression import SuppressionStack
from .visitor import LINT, check

__all__ = [
    "Attribute",
    "CheckEnvironment",
    "CoverageReport",
    "DeclarationNode",
    "LINT",
    "NodeKind",
    "Span",
    "SuppressionStack",
    "check",
]
