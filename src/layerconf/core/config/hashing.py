# src/layerconf/core/config/hashing.py
"""
Hashing canônico de configuração do layerconf.

Este módulo gera um hash determinístico da árvore de configuração
resolvida (após o merge de todas as camadas).

O hash representa a **identidade estrutural** da configuração e é
utilizado para:
    - rastreabilidade de resoluções
    - comparação rápida entre configurações efetivas

Princípios fundamentais:
    - Hashing determinístico e reprodutível
    - Independente da ordem original das chaves
    - Baseado em serialização JSON canônica
    - Algoritmo criptográfico estável (SHA-256)

Invariantes:
    - Árvores estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres

Limites explícitos:
    - Não carrega nem resolve configuração
    - Não persiste o hash
"""


import json
import hashlib

from ..tree.types import TreeValue, ensure_tree


def canonical_json(tree: TreeValue) -> str:
    """Serialização JSON canônica: chaves ordenadas, separadores compactos, sem escape ASCII."""
    return json.dumps(
        tree,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def compute_config_hash(tree: TreeValue) -> str:
    """
    Gera um hash determinístico de uma árvore de configuração.

    Política de hashing (v1):
        - Serialização JSON canônica
        - Ordenação estável de chaves
        - Separadores compactos (sem espaços supérfluos)
        - Codificação UTF-8
        - Algoritmo SHA-256

    Decisões arquiteturais:
        - Qualquer variante de árvore é aceita (não apenas objetos)
        - A árvore é validada antes do hashing

    Args:
        tree (TreeValue): Configuração efetiva.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        InvalidTreeValueError: Se o valor não pertencer ao modelo de árvore.
    """
    canonical = canonical_json(ensure_tree(tree))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
