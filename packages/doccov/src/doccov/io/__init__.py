from __future__ import annotations

from .tree import load_tree, node_from_payload, tree_payload

__all__ = ["load_tree", "node_from_payload", "tree_payload"]
