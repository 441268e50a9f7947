# src/layerconf/core/tree/types.py
"""
Modelo de dados canônico da árvore de configuração (TreeValue).

Uma TreeValue é o conjunto fechado de valores nativos de JSON em Python:

    Null    → None
    Bool    → bool
    Number  → int | float (nunca bool)
    String  → str
    Array   → list de TreeValue
    Object  → dict com chaves str

Princípios fundamentais:
    - TreeValue não possui identidade além do valor estrutural
    - Igualdade é estrutural e sensível à variante
    - A ordem de inserção de objetos é preservada, mas irrelevante para igualdade

Decisões arquiteturais:
    - `True` não é igual a `1` (bool e number são variantes distintas)
    - `1` não é igual a `1.0` (o número lembra se foi escrito como inteiro)
    - Tuplas são aceitas na validação e normalizadas para listas

Limites explícitos:
    - Não faz parse nem serialização de texto
    - Não realiza merge ou diff

Este módulo existe para que merge e diff operem sobre um conjunto
fechado e conhecido de variantes, com igualdade sem ambiguidades.
"""

from __future__ import annotations

import math
from copy import deepcopy
from typing import Any, Dict, List, Union

from ..errors import tree_invalid_value
from ..exceptions import InvalidTreeValueError


TreeValue = Union[None, bool, int, float, str, List["TreeValue"], Dict[str, "TreeValue"]]

NULL = "null"
BOOL = "bool"
NUMBER = "number"
STRING = "string"
ARRAY = "array"
OBJECT = "object"


def variant_of(value: TreeValue) -> str:
    """Retorna o nome da variante de `value`."""
    if value is None:
        return NULL
    # bool antes de number: bool é subclasse de int
    if isinstance(value, bool):
        return BOOL
    if isinstance(value, (int, float)):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if isinstance(value, list):
        return ARRAY
    if isinstance(value, dict):
        return OBJECT
    raise InvalidTreeValueError(
        tree_invalid_value(
            path="$",
            python_type=type(value).__name__,
            reason="tipo fora do modelo de árvore",
        )
    )


def is_object(value: Any) -> bool:
    return isinstance(value, dict)


def tree_equal(a: TreeValue, b: TreeValue) -> bool:
    """
    Igualdade estrutural e sensível à variante entre duas TreeValues.

    Duas árvores são iguais sse possuem a mesma variante e o mesmo
    conteúdo, recursivamente. Diferente de `==`, distingue `True` de `1`
    e `1` de `1.0`.
    """
    if isinstance(a, dict):
        if not isinstance(b, dict) or len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b or not tree_equal(value, b[key]):
                return False
        return True

    if isinstance(a, list):
        if not isinstance(b, list) or len(a) != len(b):
            return False
        return all(tree_equal(x, y) for x, y in zip(a, b))

    if type(a) is not type(b):
        return False

    return a == b


def clone(value: TreeValue) -> TreeValue:
    """Cópia profunda: nenhuma subárvore do resultado compartilha memória com `value`."""
    return deepcopy(value)


def ensure_tree(value: Any, *, path: str = "$") -> TreeValue:
    """
    Valida que `value` é uma TreeValue bem formada e retorna sua forma normalizada.

    Regras de validação:
        - Chaves de objeto devem ser `str`
        - Números devem ser finitos (NaN/Infinity não existem em JSON)
        - Tuplas são normalizadas para listas
        - Qualquer outro tipo Python é rejeitado

    Args:
        value (Any): Valor Python arbitrário.
        path (str): Caminho usado nas mensagens de erro.

    Returns:
        TreeValue: Nova árvore normalizada (o input não é mutado).

    Raises:
        InvalidTreeValueError: Se algum nó não pertencer ao modelo.
    """
    if value is None or isinstance(value, (bool, str)):
        return value

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidTreeValueError(
                tree_invalid_value(
                    path=path, python_type="float", reason="número não finito"
                )
            )
        # subclasses (ex.: IntEnum) são reduzidas ao tipo base
        return float(value) if isinstance(value, float) else int(value)

    if isinstance(value, (list, tuple)):
        return [ensure_tree(item, path=f"{path}[{i}]") for i, item in enumerate(value)]

    if isinstance(value, dict):
        out: Dict[str, TreeValue] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise InvalidTreeValueError(
                    tree_invalid_value(
                        path=f"{path}.{key!r}",
                        python_type=type(key).__name__,
                        reason="chave de objeto não é string",
                    )
                )
            out[key] = ensure_tree(item, path=f"{path}.{key}")
        return out

    raise InvalidTreeValueError(
        tree_invalid_value(
            path=path,
            python_type=type(value).__name__,
            reason="tipo fora do modelo de árvore",
        )
    )
