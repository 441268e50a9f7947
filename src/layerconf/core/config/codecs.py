# src/layerconf/core/config/codecs.py
"""
Codecs de configuração: texto ⇄ árvore e tipo ⇄ árvore.

Este módulo reúne as duas fronteiras de conversão utilizadas pelo
loader de configuração:

Texto → árvore:
    - `strip_comments` remove comentários (`//`, `/* */`, `#`) de texto JSON
    - `parse_text` converte texto JSON (json) ou YAML (PyYAML) em TreeValue

Tipo ⇄ árvore (fronteira genérica):
    - `TreeCodec` é a capacidade "codifica para árvore / decodifica da árvore"
    - `TreeSerializable` é a capacidade de tipos que se convertem sozinhos
    - `PydanticCodec` implementa a capacidade via `pydantic.TypeAdapter`
      (dataclasses, BaseModel, TypedDict, dict, builtins)
    - `codec_for` escolhe o codec adequado para um tipo alvo

Decisões arquiteturais:
    - A fronteira é por capacidade (Protocol), não por herança
    - Toda árvore produzida passa por `ensure_tree`
    - Erros dos codecs são propagados; o loader os converte em erros de camada

Limites explícitos:
    - Não realiza merge
    - Não lê arquivos
    - Não conhece camadas nem precedência
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Generic, Protocol, Type, TypeVar, runtime_checkable

import yaml  # PyYAML
from pydantic import TypeAdapter

from ..errors import unsupported_format
from ..tree.types import TreeValue, ensure_tree
from .errors import UnsupportedConfigFormatError
from .sources import SourceText


T = TypeVar("T")

JSON = "json"
YAML = "yaml"
SUPPORTED_FORMATS = (JSON, YAML)

_YAML_SUFFIXES = {".yaml", ".yml"}


# -----------------------------
# Texto → árvore
# -----------------------------
def strip_comments(text: str) -> str:
    """
    Remove comentários de texto JSON, preservando literais de string.

    Comentários suportados:
        - `// ...` até o fim da linha
        - `# ...` até o fim da linha
        - `/* ... */` (bloco; não terminado → até o fim do texto)

    Cada caractere de comentário é substituído por espaço e quebras de
    linha são mantidas, para que linha/coluna de erros de parse continuem
    apontando para o texto original.
    """
    out = []
    i = 0
    n = len(text)
    in_string = False

    while i < n:
        ch = text[i]

        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
            continue

        if ch == "#" or text.startswith("//", i):
            end = text.find("\n", i)
            end = n if end == -1 else end
            out.append(" " * (end - i))
            i = end
            continue

        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            end = n if end == -1 else end + 2
            out.append("".join(c if c == "\n" else " " for c in text[i:end]))
            i = end
            continue

        out.append(ch)
        i += 1

    return "".join(out)


def detect_format(source: SourceText) -> str:
    """YAML para arquivos `.yaml`/`.yml`; JSON para todo o resto (incluindo texto literal)."""
    if source.is_file and source.path is not None:
        if Path(source.path).suffix.lower() in _YAML_SUFFIXES:
            return YAML
    return JSON


def parse_text(text: str, text_format: str = JSON, *, strip: bool = True) -> TreeValue:
    """
    Converte texto de configuração em TreeValue.

    Política de parse (v1):
        - json: comentários removidos (quando `strip`) e `json.loads`
        - yaml: `yaml.safe_load`; documento vazio é interpretado como `{}`

    Args:
        text (str): Conteúdo textual.
        text_format (str): `"json"` ou `"yaml"`.
        strip (bool): Remove comentários antes do parse JSON.

    Returns:
        TreeValue: Árvore validada.

    Raises:
        UnsupportedConfigFormatError: Formato desconhecido.
        json.JSONDecodeError: Texto JSON inválido.
        yaml.YAMLError: Texto YAML inválido.
        InvalidTreeValueError: Conteúdo fora do modelo de árvore.
    """
    if text_format == JSON:
        data = json.loads(strip_comments(text) if strip else text)

    elif text_format == YAML:
        data = yaml.safe_load(text)
        if data is None:
            data = {}

    else:
        raise UnsupportedConfigFormatError(
            unsupported_format(text_format=text_format, supported=SUPPORTED_FORMATS)
        )

    return ensure_tree(data)


# -----------------------------
# Tipo ⇄ árvore
# -----------------------------
@runtime_checkable
class TreeCodec(Protocol[T]):
    """Capacidade de converter valores de um tipo para árvore e de volta."""

    def encode(self, value: T) -> TreeValue:
        ...

    def decode(self, tree: TreeValue) -> T:
        ...


@runtime_checkable
class TreeSerializable(Protocol):
    """
    Capacidade de tipos que sabem se converter para árvore.

    - `to_tree()` (método de instância) → TreeValue
    - `from_tree(tree)` (classmethod) → instância
    """

    def to_tree(self) -> TreeValue:
        ...

    @classmethod
    def from_tree(cls, tree: TreeValue) -> Any:
        ...


class SelfCodec(Generic[T]):
    """Codec que delega para os métodos `to_tree`/`from_tree` do próprio tipo."""

    def __init__(self, target: Type[T]):
        self.target = target

    def encode(self, value: T) -> TreeValue:
        return ensure_tree(value.to_tree())

    def decode(self, tree: TreeValue) -> T:
        return self.target.from_tree(tree)


class PydanticCodec(Generic[T]):
    """
    Codec genérico baseado em `pydantic.TypeAdapter`.

    Decisões arquiteturais:
        - Encode usa `mode="json"`: tuplas viram listas, enums viram valores
        - `exclude_none=True` omite campos None do overlay, para que herdem
          da camada inferior em vez de agir como tombstone
        - Decode usa validação padrão (lax) do pydantic
    """

    def __init__(self, target: Any, *, exclude_none: bool = False):
        self.target = target
        self.exclude_none = exclude_none
        self._adapter = TypeAdapter(target)

    def encode(self, value: T) -> TreeValue:
        data = self._adapter.dump_python(
            value, mode="json", exclude_none=self.exclude_none
        )
        return ensure_tree(data)

    def decode(self, tree: TreeValue) -> T:
        return self._adapter.validate_python(tree)


def implements_tree_serializable(target: Any) -> bool:
    return (
        isinstance(target, type)
        and callable(getattr(target, "to_tree", None))
        and callable(getattr(target, "from_tree", None))
    )


def codec_for(target: Any, *, exclude_none: bool = False) -> TreeCodec:
    """
    Escolhe o codec para o tipo alvo.

    - Tipos que implementam `TreeSerializable` usam `SelfCodec`
    - Qualquer outro tipo usa `PydanticCodec`
    """
    if implements_tree_serializable(target):
        return SelfCodec(target)
    return PydanticCodec(target, exclude_none=exclude_none)


def type_name(target: Any) -> str:
    return getattr(target, "__qualname__", None) or repr(target)


__all__ = [
    "JSON",
    "YAML",
    "SUPPORTED_FORMATS",
    "strip_comments",
    "detect_format",
    "parse_text",
    "TreeCodec",
    "TreeSerializable",
    "SelfCodec",
    "PydanticCodec",
    "codec_for",
    "implements_tree_serializable",
    "type_name",
]
