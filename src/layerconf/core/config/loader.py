# src/layerconf/core/config/loader.py
"""
Loader canônico de configuração em camadas do layerconf.

Este módulo resolve a configuração efetiva a partir de até três camadas,
aplicadas em ordem estrita de precedência:

    default  <  user  <  cmdline

Estágios (estritamente sequenciais, cada um fatal em caso de falha):
    1. default  → fonte (arquivo ou literal) → texto → árvore
    2. user     → opcional; mesma aquisição; merge sobre o acumulado
    3. cmdline  → opcional; valor tipado codificado em árvore; merge sobre o acumulado
    4. decode   → árvore final decodificada no tipo alvo

Princípios fundamentais:
    - Uma camada superior sempre vence, em qualquer profundidade
    - Omitir uma chave significa herdar; `null` significa remover
    - A resolução é tudo-ou-nada: nenhum resultado parcial é retornado

Invariantes:
    - A configuração default é obrigatória e deve ser sempre válida
    - Ausência de user ou cmdline nunca é erro
    - Cada resolução possui sua própria árvore e seu próprio trace

Limites explícitos:
    - Não faz parse de argumentos de processo
    - Não persiste configuração ou hash
    - Não valida semântica de domínio além do decode do tipo alvo
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Type, TypeVar, Union

import yaml  # PyYAML
from pydantic import ValidationError

from ..errors import (
    ConfigErrorPayload,
    decode_failure,
    default_invalid,
    encode_failure,
    unsupported_format,
    user_invalid,
)
from ..exceptions import ConfigError, InvalidTreeValueError
from ..tree.merge import merge
from ..tree.types import TreeValue, clone, variant_of
from .codecs import SUPPORTED_FORMATS, TreeCodec, codec_for, detect_format, parse_text, type_name
from .errors import (
    DecodeFailureError,
    DefaultUnreadableOrInvalidError,
    EncodeFailureError,
    UnsupportedConfigFormatError,
    UserInvalidError,
)
from .hashing import compute_config_hash
from .sources import default_config_path, read_source
from .trace import (
    STAGE_CMDLINE,
    STAGE_DECODE,
    STAGE_DEFAULT,
    STAGE_USER,
    ResolutionTrace,
)


T = TypeVar("T")

Source = Union[str, Path]


@dataclass
class Resolution:
    """
    Resultado de uma resolução não tipada.

    Campos:
    - tree: árvore final (default + user + cmdline)
    - config_hash: hash canônico da árvore final
    - layers: árvores efetivamente aplicadas, por estágio
    - trace: rastro estruturado da resolução
    """

    tree: TreeValue
    config_hash: str
    layers: Dict[str, TreeValue] = field(default_factory=dict)
    trace: ResolutionTrace = field(default_factory=ResolutionTrace)


def _acquire(
    source: Source,
    *,
    stage: str,
    text_format: Optional[str],
    trace: ResolutionTrace,
    error_cls: Type[ConfigError],
    payload_factory: Callable[..., ConfigErrorPayload],
) -> TreeValue:
    """
    Adquire uma camada textual: fonte → texto → árvore.

    A leitura como arquivo é tentada primeiro; em caso de falha o texto
    original é interpretado como conteúdo literal. Apenas falhas de parse
    são fatais.
    """
    src = read_source(source)
    if src.is_file:
        trace.log(stage=stage, level="info", message=f"fonte lida como arquivo: {src.path}",
                  origin=src.origin, path=src.path)
    else:
        trace.log(stage=stage, level="info",
                  message="leitura como arquivo falhou, fonte interpretada como conteúdo literal",
                  origin=src.origin, read_error=src.read_error)

    fmt = text_format or detect_format(src)

    try:
        tree = parse_text(src.text, fmt)
    # json.JSONDecodeError é subclasse de ValueError; RecursionError cobre
    # aninhamento excessivo e aliases YAML autorreferentes
    except (ValueError, RecursionError, yaml.YAMLError, InvalidTreeValueError) as exc:
        payload = payload_factory(
            origin=src.origin,
            path=src.path,
            text_format=fmt,
            exc_type=type(exc).__name__,
            exc_message=str(exc),
        )
        trace.log(stage=stage, level="error", message=payload.message, error=payload.to_dict())
        raise error_cls(payload) from exc

    trace.log(stage=stage, level="debug", message=f"camada {stage} interpretada ({fmt})",
              variant=variant_of(tree), format=fmt)
    return tree


def _apply(
    accumulated: TreeValue,
    overlay: TreeValue,
    *,
    stage: str,
    layers: Dict[str, TreeValue],
    trace: ResolutionTrace,
) -> TreeValue:
    layers[stage] = clone(overlay)
    result = merge(accumulated, overlay)
    trace.log(stage=stage, level="debug", message=f"camada {stage} aplicada",
              config_hash=compute_config_hash(result))
    return result


def _resolve_files(
    *,
    default: Optional[Source],
    user: Optional[Source],
    text_format: Optional[str],
    trace: ResolutionTrace,
    layers: Dict[str, TreeValue],
) -> TreeValue:
    """Estágios 1 e 2: default obrigatório e user opcional."""
    if text_format is not None and text_format not in SUPPORTED_FORMATS:
        raise UnsupportedConfigFormatError(
            unsupported_format(text_format=text_format, supported=SUPPORTED_FORMATS)
        )

    if default is None:
        default = default_config_path()
        trace.log(stage=STAGE_DEFAULT, level="info",
                  message=f"default não informado, usando caminho convencional: {default}",
                  path=str(default))

    accumulated = _acquire(
        default,
        stage=STAGE_DEFAULT,
        text_format=text_format,
        trace=trace,
        error_cls=DefaultUnreadableOrInvalidError,
        payload_factory=default_invalid,
    )
    layers[STAGE_DEFAULT] = clone(accumulated)

    if user is None:
        # permitido, mas sinalizado
        trace.add_warning(stage=STAGE_USER, message="nenhuma configuração de usuário informada")
        return accumulated

    user_tree = _acquire(
        user,
        stage=STAGE_USER,
        text_format=text_format,
        trace=trace,
        error_cls=UserInvalidError,
        payload_factory=user_invalid,
    )
    return _apply(accumulated, user_tree, stage=STAGE_USER, layers=layers, trace=trace)


def _resolve_layers(
    *,
    default: Optional[Source],
    user: Optional[Source],
    cmdline: Optional[Callable[[], TreeValue]],
    text_format: Optional[str],
    trace: ResolutionTrace,
) -> Resolution:
    """
    Estágios 1 a 3. `cmdline` produz o overlay somente após default e user,
    preservando a ordem dos estágios mesmo quando a codificação falha.
    """
    layers: Dict[str, TreeValue] = {}

    tree = _resolve_files(
        default=default, user=user, text_format=text_format, trace=trace, layers=layers
    )

    if cmdline is not None:
        tree = _apply(tree, cmdline(), stage=STAGE_CMDLINE, layers=layers, trace=trace)

    return Resolution(tree=tree, config_hash=compute_config_hash(tree), layers=layers, trace=trace)


def resolve_tree(
    *,
    default: Optional[Source] = None,
    user: Optional[Source] = None,
    cmdline_tree: Optional[TreeValue] = None,
    text_format: Optional[str] = None,
    trace: Optional[ResolutionTrace] = None,
) -> Resolution:
    """
    Resolve a configuração efetiva como árvore, sem decodificar.

    Política de resolução:
        - `default` é obrigatório; quando `None`, usa `default_config_path()`
        - `user` é opcional; quando presente sempre tem prioridade sobre default
        - `cmdline_tree` é opcional; quando presente vence user e default

    Args:
        default (Optional[Source]): Caminho ou texto da configuração default.
        user (Optional[Source]): Caminho ou texto da configuração de usuário.
        cmdline_tree (Optional[TreeValue]): Overlay de linha de comando já em árvore.
            `None` significa ausente.
        text_format (Optional[str]): Força `"json"` ou `"yaml"`; `None` detecta pela extensão.
        trace (Optional[ResolutionTrace]): Trace a preencher; um novo é criado se omitido.

    Returns:
        Resolution: Árvore final, hash canônico, camadas aplicadas e trace.

    Raises:
        DefaultUnreadableOrInvalidError: Default ilegível como arquivo e como literal.
        UserInvalidError: User presente mas inválido.
        UnsupportedConfigFormatError: `text_format` desconhecido.
    """
    return _resolve_layers(
        default=default,
        user=user,
        cmdline=None if cmdline_tree is None else (lambda: clone(cmdline_tree)),
        text_format=text_format,
        trace=trace if trace is not None else ResolutionTrace(),
    )


def _codec_for_target(target: Any, trace: ResolutionTrace) -> TreeCodec:
    try:
        return codec_for(target)
    except Exception as exc:
        # tipo alvo sem schema possível: falha de decode antecipada
        payload = decode_failure(
            target=type_name(target),
            errors=None,
            exc_type=type(exc).__name__,
            exc_message=str(exc),
        )
        trace.log(stage=STAGE_DECODE, level="error", message=payload.message,
                  error=payload.to_dict())
        raise DecodeFailureError(payload) from exc


def _encode_cmdline(codec: TreeCodec, cmdline: Any, trace: ResolutionTrace) -> TreeValue:
    try:
        return codec.encode(cmdline)
    except Exception as exc:
        payload = encode_failure(
            target=type_name(type(cmdline)),
            exc_type=type(exc).__name__,
            exc_message=str(exc),
        )
        trace.log(stage=STAGE_CMDLINE, level="error", message=payload.message,
                  error=payload.to_dict())
        raise EncodeFailureError(payload) from exc


def resolve(
    target: Any,
    *,
    default: Optional[Source] = None,
    user: Optional[Source] = None,
    cmdline: Optional[T] = None,
    codec: Optional[TreeCodec] = None,
    text_format: Optional[str] = None,
    trace: Optional[ResolutionTrace] = None,
) -> T:
    """
    Resolve a configuração efetiva e a decodifica no tipo alvo.

    Precedência: default < user < cmdline. Os estágios de arquivo e o merge
    do cmdline são os mesmos de `resolve_tree`; este nível acrescenta apenas
    a codificação do cmdline e o decode final.

    Args:
        target: Tipo alvo (dataclass, BaseModel, TypedDict, dict, ou um tipo
            que implemente `to_tree`/`from_tree`).
        default: Caminho ou texto da configuração default (obrigatória).
        user: Caminho ou texto da configuração de usuário (opcional).
        cmdline: Valor já tipado vindo da linha de comando (opcional).
        codec: Codec explícito; por padrão `codec_for(target)`.
        text_format: Força `"json"` ou `"yaml"`.
        trace: Trace a preencher.

    Returns:
        Instância do tipo alvo.

    Raises:
        DefaultUnreadableOrInvalidError: Default ilegível como arquivo e como literal.
        UserInvalidError: User presente mas inválido.
        EncodeFailureError: Valor de cmdline não conversível em árvore.
        DecodeFailureError: Árvore final incompatível com o tipo alvo, ou tipo
            alvo para o qual nenhum codec pode ser construído (levantado antes
            de qualquer leitura).
    """
    trace = trace if trace is not None else ResolutionTrace()
    codec = codec if codec is not None else _codec_for_target(target, trace)

    resolution = _resolve_layers(
        default=default,
        user=user,
        cmdline=None if cmdline is None else (lambda: _encode_cmdline(codec, cmdline, trace)),
        text_format=text_format,
        trace=trace,
    )

    try:
        value = codec.decode(resolution.tree)
    except Exception as exc:
        errors = exc.errors(include_url=False) if isinstance(exc, ValidationError) else None
        payload = decode_failure(
            target=type_name(target),
            errors=errors,
            exc_type=type(exc).__name__,
            exc_message=str(exc),
        )
        trace.log(stage=STAGE_DECODE, level="error", message=payload.message,
                  error=payload.to_dict())
        raise DecodeFailureError(payload) from exc

    trace.log(stage=STAGE_DECODE, level="info", message=f"configuração final decodificada em {type_name(target)}",
              config_hash=resolution.config_hash)
    return value
