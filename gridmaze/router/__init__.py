"""Carving policies."""

__all__ = [
    "BinaryTree",
    "SideWinder",
    "ROUTERS",
]

from .binarytree import BinaryTree
from .sidewinder import SideWinder

ROUTERS = {
    "binarytree": BinaryTree,
    "sidewinder": SideWinder,
}
