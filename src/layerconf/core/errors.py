"""
layerconf — Canonical Error Payloads (v1)

Este módulo define o padrão canônico de erros do layerconf.
Erros de resolução de configuração fazem parte do contrato operacional
da biblioteca e devem ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Cada falha identifica a camada (default, user, cmdline) e o estágio
(leitura, parse, encode, decode) em que ocorreu.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConfigErrorPayload:
    """
    Payload canônico de erro do layerconf.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Camadas de configuração
CONFIG_DEFAULT_INVALID = "CONFIG_DEFAULT_INVALID"
CONFIG_USER_INVALID = "CONFIG_USER_INVALID"
CONFIG_ENCODE_FAILURE = "CONFIG_ENCODE_FAILURE"
CONFIG_DECODE_FAILURE = "CONFIG_DECODE_FAILURE"
CONFIG_UNSUPPORTED_FORMAT = "CONFIG_UNSUPPORTED_FORMAT"

# Árvore de valores
TREE_INVALID_VALUE = "TREE_INVALID_VALUE"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def default_invalid(
    *,
    origin: str,
    path: Optional[str],
    text_format: str,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Corrija a sintaxe do arquivo (ou texto) de defaults. A configuração default deve ser sempre válida.",
) -> ConfigErrorPayload:
    return ConfigErrorPayload(
        type=CONFIG_DEFAULT_INVALID,
        message="Configuração default ilegível ou inválida",
        details={
            "layer": "default",
            "origin": origin,
            "path": path,
            "format": text_format,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
    )


def user_invalid(
    *,
    origin: str,
    path: Optional[str],
    text_format: str,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Corrija a sintaxe da configuração de usuário ou remova-a para usar apenas os defaults.",
) -> ConfigErrorPayload:
    return ConfigErrorPayload(
        type=CONFIG_USER_INVALID,
        message="Configuração de usuário inválida",
        details={
            "layer": "user",
            "origin": origin,
            "path": path,
            "format": text_format,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
    )


def encode_failure(
    *,
    target: str,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "O valor de linha de comando deve ser sempre serializável para a árvore de configuração. Revise o tipo declarado.",
) -> ConfigErrorPayload:
    return ConfigErrorPayload(
        type=CONFIG_ENCODE_FAILURE,
        message="Falha ao converter o override de linha de comando em árvore",
        details={
            "layer": "cmdline",
            "target": target,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
    )


def decode_failure(
    *,
    target: str,
    errors: Optional[Any] = None,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "A configuração final não satisfaz o tipo alvo. Ajuste a camada que introduziu o campo inválido.",
) -> ConfigErrorPayload:
    return ConfigErrorPayload(
        type=CONFIG_DECODE_FAILURE,
        message="Configuração final incompatível com o tipo alvo",
        details={
            "target": target,
            "errors": errors,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
    )


def unsupported_format(
    *,
    text_format: str,
    supported: Any,
    hint: str = "Use um dos formatos suportados ou omita o formato para detecção automática.",
) -> ConfigErrorPayload:
    return ConfigErrorPayload(
        type=CONFIG_UNSUPPORTED_FORMAT,
        message=f"Formato não suportado: {text_format}",
        details={"format": text_format, "supported": list(supported)},
        hint=hint,
    )


def tree_invalid_value(
    *,
    path: str,
    python_type: str,
    reason: str,
) -> ConfigErrorPayload:
    return ConfigErrorPayload(
        type=TREE_INVALID_VALUE,
        message=f"Valor inválido na árvore de configuração em '{path}': {reason}",
        details={"path": path, "python_type": python_type, "reason": reason},
        hint="Apenas null, bool, números finitos, strings, listas e objetos com chaves string são aceitos.",
    )
