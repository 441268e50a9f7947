# src/layerconf/core/tree/__init__.py
"""
Álgebra de árvores de configuração do layerconf.

Este pacote contém o modelo de dados `TreeValue` e as operações puras
de merge e diff sobre ele.

Responsabilidades do pacote:
    - Definir as variantes da árvore e a igualdade estrutural
    - Aplicar overlays com semântica null-as-delete
    - Calcular o overlay mínimo entre duas árvores

Limites explícitos:
    - Não realiza I/O
    - Não faz parse nem serialização de texto
    - Não conhece camadas (default, user, cmdline)
"""

from .types import (
    TreeValue,
    variant_of,
    is_object,
    tree_equal,
    clone,
    ensure_tree,
)
from .merge import merge, merged, merge_all
from .diff import Patch, diff

__all__ = [
    "TreeValue",
    "variant_of",
    "is_object",
    "tree_equal",
    "clone",
    "ensure_tree",
    "merge",
    "merged",
    "merge_all",
    "Patch",
    "diff",
]
