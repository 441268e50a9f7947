# src/layerconf/core/tree/diff.py
"""
Diff canônico entre árvores de configuração.

Este módulo calcula o overlay mínimo que, aplicado via `merge` sobre
`a`, reproduz o efeito de aplicar `b`.

Política de diff (v1):
    - object vs object → diff recursivo sobre as chaves de `b`
        - chave ausente em `a` → incluída integralmente
        - chave presente e igual → omitida
        - chave presente e diferente → diff recursivo
    - qualquer outro caso → sem diferença se iguais, senão `b` integralmente

Assimetria intencional:
    Chaves presentes apenas em `a` não são representadas. O overlay só
    expressa remoção via `None` explícito em `b`. O modo opt-in
    `tombstones=True` sintetiza `None` para essas chaves.

Decisões arquiteturais:
    - O resultado é `Optional[Patch]`, e não `Optional[TreeValue]`:
      `None` também é a variante Null da árvore, então um overlay Null
      (ex.: `diff(1, None)`) precisa ser distinguível de "sem diferença"

Invariantes:
    - `merged(a, diff(a, b).value)` é estruturalmente igual a `merged(a, b)`
      sempre que `a` não contém `None` explícito
    - Nenhum input é mutado e o patch não compartilha subárvores com `b`

Limites explícitos:
    - Um `None` já presente em `a` e repetido em `b` é "igual" e é omitido
      do patch, mas `merged(a, b)` o aplica como remoção. Com
      `a = b = {"k": {"y": None}}`, `diff` retorna `None` enquanto
      `merged(a, b) == {"k": {}}`. O algoritmo é mantido; quem precisa da
      lei para bases com null deve normalizá-las antes com `merged(a, a)`
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .merge import merged
from .types import TreeValue, clone, is_object, tree_equal


@dataclass(frozen=True)
class Patch:
    """Overlay produzido por `diff`. `value` pode ser `None` (variante Null)."""

    value: TreeValue

    def apply(self, base: TreeValue) -> TreeValue:
        """Aplica o patch sobre uma cópia de `base`."""
        return merged(base, self.value)


def diff(a: TreeValue, b: TreeValue, *, tombstones: bool = False) -> Optional[Patch]:
    """
    Calcula o overlay que transforma `a` em `b`.

    Args:
        a (TreeValue): Árvore original (base).
        b (TreeValue): Árvore alvo.
        tombstones (bool): Quando True, chaves presentes apenas em `a`
            são emitidas como `None` (remoção explícita).

    Returns:
        Optional[Patch]: `None` quando não há diferença a aplicar;
        caso contrário o overlay mínimo embrulhado em `Patch`.
    """
    if is_object(a) and is_object(b):
        result: Dict[str, TreeValue] = {}

        for key, value_b in b.items():
            if key not in a:
                result[key] = clone(value_b)
                continue

            value_a = a[key]
            if tree_equal(value_a, value_b):
                continue

            nested = diff(value_a, value_b, tombstones=tombstones)
            if nested is not None:
                result[key] = nested.value

        if tombstones:
            for key in a:
                if key not in b:
                    result[key] = None

        return Patch(result) if result else None

    if tree_equal(a, b):
        return None

    return Patch(clone(b))
