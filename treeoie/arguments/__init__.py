"""Second-argument candidates, one class per typed dependency.

Usage:
    from treeoie.arguments import create_argument, Role

    arg = create_argument(node, relation)
    if arg is not None and arg.role is Role.OBJECT:
        extractions = arg.create_tree_extractions()
"""

from typing import Dict, Optional, Type

from ..extraction.tree_extraction import TreeExtraction
from ..tree.node import Node
from .base import Argument2, Role
from .kom import Kom
from .objects import Obja, Obja2, Objd, Objg, Objp
from .pp import Pp
from .pred import Pred

# Typed dependency label -> argument class
ARGUMENT_TYPES: Dict[str, Type[Argument2]] = {
    "objd": Objd,
    "obja": Obja,
    "obja2": Obja2,
    "objg": Objg,
    "objp": Objp,
    "pred": Pred,
    "pp": Pp,
    "kom": Kom,
}


def create_argument(node: Node, relation: TreeExtraction) -> Optional[Argument2]:
    """Wrap ``node`` in the argument class for its label, or return None for other labels."""
    cls = ARGUMENT_TYPES.get(node.label_to_parent)
    if cls is None:
        return None
    return cls(node, relation)


__all__ = [
    "ARGUMENT_TYPES",
    "create_argument",
    "Argument2",
    "Role",
    "Obja",
    "Obja2",
    "Objd",
    "Objg",
    "Objp",
    "Pred",
    "Pp",
    "Kom",
]
