# src/layerconf/core/tree/merge.py
"""
Merge canônico de overlay sobre árvores de configuração.

Este módulo implementa a política oficial de merge utilizada pelo
layerconf para aplicar uma camada (overlay) sobre a configuração
acumulada (base).

Política de merge (v1):
    - object + object → merge recursivo por chave
    - valor `None` no overlay → remove a chave da base (tombstone)
    - chave ausente no overlay → herdada da base
    - qualquer outro caso → substituição integral pelo overlay
      (inclui array + array, escalares e conflitos de variante)

Princípios fundamentais:
    - Três estados por chave: ausente = herda, null = remove, presente = sobrescreve
    - Arrays nunca são mesclados elemento a elemento
    - Conflitos de variante não são erro: o overlay vence integralmente

Invariantes:
    - Chaves presentes apenas na base são preservadas
    - Remover uma chave inexistente é no-op
    - `None` para chave nova não insere nada

Limites explícitos:
    - Não carrega arquivos nem faz parse de texto
    - Não valida semântica de domínio
    - Não realiza coerção de tipos

Este módulo existe para garantir precedência previsível e
determinística entre as camadas de configuração.
"""

from __future__ import annotations

from typing import Dict

from .types import TreeValue, clone, is_object


def merge(base: TreeValue, overlay: TreeValue) -> TreeValue:
    """
    Aplica `overlay` sobre `base`, mutando `base` in-place.

    Quando ambos são objetos, `base` é mutado e retornado. Em qualquer
    outro caso o resultado é o próprio `overlay` (substituição integral),
    e o chamador deve rebind: `cfg = merge(cfg, overlay)`.

    O overlay é consumido: suas subárvores passam a fazer parte do
    resultado e não devem ser reutilizadas pelo chamador. Para uma
    versão sem efeitos colaterais use `merged`.

    Args:
        base (TreeValue): Configuração acumulada.
        overlay (TreeValue): Camada de maior precedência.

    Returns:
        TreeValue: Árvore resultante.
    """
    if is_object(base) and is_object(overlay):
        _merge_objects(base, overlay)
        return base

    return overlay


def _merge_objects(base: Dict[str, TreeValue], overlay: Dict[str, TreeValue]) -> None:
    for key, value in overlay.items():
        if value is None:
            base.pop(key, None)
            continue

        # placeholder None: merge sobre None substitui integralmente
        base[key] = merge(base.get(key), value)


def merged(base: TreeValue, overlay: TreeValue) -> TreeValue:
    """
    Versão pura de `merge`: nenhum input é mutado.

    O resultado não compartilha subárvores com `base` nem com `overlay`.
    """
    return merge(clone(base), clone(overlay))


def merge_all(base: TreeValue, *overlays: TreeValue) -> TreeValue:
    """Aplica os overlays em ordem sobre `base` (o último vence). Inputs não são mutados."""
    result = clone(base)
    for overlay in overlays:
        result = merge(result, clone(overlay))
    return result
