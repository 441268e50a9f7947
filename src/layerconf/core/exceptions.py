"""
layerconf — Canonical Exceptions (v1)

Este módulo define a raiz tipada de exceções do layerconf.

Objetivo:
- Permitir que o core levante exceções semânticas tipadas
- Carregar sempre um `ConfigErrorPayload` estruturado
- Evitar ValueError/RuntimeError genéricos em guardrails críticos

Regras:
- Não importa nenhum subpacote do core (evita ciclos entre tree e config).
- Exceções carregam apenas dados estruturados (serializáveis) no payload.
"""

from __future__ import annotations

from .errors import ConfigErrorPayload


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do layerconf.

    Todas as exceções levantadas durante leitura, parse, merge,
    encode e decode de configuração herdam desta classe.

    Importante:
    - `payload` é sempre um `ConfigErrorPayload`
    - O erro original do codec é preservado via encadeamento (`__cause__`)
    """

    def __init__(self, payload: ConfigErrorPayload):
        super().__init__(payload.message)
        self.payload = payload

    @property
    def details(self):
        return self.payload.details


class InvalidTreeValueError(ConfigError):
    """Valor Python que não pertence ao modelo de árvore (JSON nativo)."""
