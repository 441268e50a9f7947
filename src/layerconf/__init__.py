"""
layerconf — resolução de configuração em camadas sobre árvores JSON.

Uma configuração final tipada é resolvida a partir de até três camadas:

    default (obrigatória)  <  user (opcional)  <  cmdline (opcional)

As camadas são mescladas com semântica de três estados por chave:
ausente = herda, null = remove, presente = sobrescreve. Arrays e
escalares são sempre substituídos integralmente.

Arquitetura em alto nível:
    - core.tree   → TreeValue, merge, diff
    - core.config → fontes, codecs, loader, hashing, trace
"""

from .core.tree import TreeValue, Patch, diff, merge, merged, merge_all, tree_equal
from .core.config import (
    Resolution,
    ResolutionTrace,
    resolve,
    resolve_tree,
    ConfigError,
    DefaultUnreadableOrInvalidError,
    UserInvalidError,
    EncodeFailureError,
    DecodeFailureError,
)

__version__ = "0.1.0"

__all__ = [
    "TreeValue",
    "Patch",
    "diff",
    "merge",
    "merged",
    "merge_all",
    "tree_equal",
    "Resolution",
    "ResolutionTrace",
    "resolve",
    "resolve_tree",
    "ConfigError",
    "DefaultUnreadableOrInvalidError",
    "UserInvalidError",
    "EncodeFailureError",
    "DecodeFailureError",
]
