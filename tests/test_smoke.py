# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do layerconf.

Este módulo contém testes mínimos cujo único objetivo é garantir que:
- o pacote é importável
- a API pública declarada em `__all__` existe
- o ambiente de testes (pytest) está funcional

Limites explícitos:
    - Não testar lógica de merge, diff ou resolução
    - Não acumular asserts funcionais
"""

import layerconf


def test_smoke():
    """
    Smoke test mínimo do pacote.

    Invariantes:
        - Todo nome em `layerconf.__all__` é resolvível
    """
    for name in layerconf.__all__:
        assert hasattr(layerconf, name), name
