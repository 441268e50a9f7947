# src/layerconf/core/config/errors.py
"""
Exceções canônicas da camada de resolução de configuração do layerconf.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a aquisição, parse, merge, encode e decode das camadas de configuração.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Toda falha de estágio é fatal (resolução tudo-ou-nada)
    - O erro original do codec é preservado como causa (`__cause__`)

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Toda exceção carrega um `ConfigErrorPayload` em `.payload`
    - Ausência de camada de usuário ou de cmdline nunca é erro

Limites explícitos:
    - Não realiza fallback ou recovery além do fallback arquivo → literal
    - Não depende do loader nem da álgebra de árvores
"""

from ..exceptions import ConfigError, InvalidTreeValueError


class DefaultUnreadableOrInvalidError(ConfigError):
    """
    Exceção levantada quando a configuração default não pode ser
    interpretada nem como conteúdo de arquivo nem como texto literal.

    Decisões arquiteturais:
        - A configuração default deve ser sempre sintaticamente válida
        - A falha ocorre independentemente da validade de user/cmdline
    """


class UserInvalidError(ConfigError):
    """
    Exceção levantada quando uma configuração de usuário foi fornecida,
    mas não pôde ser interpretada.

    Limites explícitos:
        - Não é levantada quando a camada de usuário está ausente
    """


class EncodeFailureError(ConfigError):
    """
    Exceção levantada quando o valor tipado de linha de comando não pôde
    ser convertido para árvore. Representa violação de contrato do tipo.
    """


class DecodeFailureError(ConfigError):
    """
    Exceção levantada quando a árvore final não satisfaz o formato
    exigido pelo tipo alvo.

    Os erros estruturais do codec ficam em `payload.details["errors"]`.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato textual solicitado não é
    suportado pelo codec.

    Formatos suportados (v1):
        - JSON com comentários (json)
        - YAML (yaml)
    """


__all__ = [
    "ConfigError",
    "InvalidTreeValueError",
    "DefaultUnreadableOrInvalidError",
    "UserInvalidError",
    "EncodeFailureError",
    "DecodeFailureError",
    "UnsupportedConfigFormatError",
]
