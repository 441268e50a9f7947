# src/layerconf/core/config/sources.py
"""
Aquisição de fontes de configuração (arquivo ou texto literal).

Uma fonte de configuração é uma string que pode ser:
    - um caminho de arquivo no filesystem
    - o próprio conteúdo textual da configuração

Política de resolução (v1):
    1. Tenta ler a string como caminho de arquivo
    2. Se a leitura falhar, a string original é tratada como conteúdo literal

Decisões arquiteturais:
    - O fallback é incondicional e silencioso no nível de I/O
    - A falha de leitura não é engolida: fica registrada em `read_error`
      para que o loader possa rastreá-la
    - Apenas falhas de parse (responsabilidade do loader) são fatais

Limites explícitos:
    - Não faz parse de texto
    - Não remove comentários
    - Não aplica retries nem timeouts
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


FILE = "file"
LITERAL = "literal"

DEFAULT_CONF_DIR = "conf"
DEFAULT_CONF_SUFFIX = ".json.default"


@dataclass(frozen=True)
class SourceText:
    """
    Texto adquirido de uma fonte de configuração.

    Campos:
    - text: conteúdo bruto (ainda com comentários)
    - origin: `"file"` ou `"literal"`
    - path: caminho lido quando origin é `"file"`
    - read_error: descrição da falha de leitura que levou ao fallback literal
    """

    text: str
    origin: str
    path: Optional[str] = None
    read_error: Optional[str] = None

    @property
    def is_file(self) -> bool:
        return self.origin == FILE


def read_source(source: Union[str, Path]) -> SourceText:
    """
    Resolve uma fonte de configuração em texto.

    Passo 1: leitura como arquivo (UTF-8).
    Passo 2: em caso de `OSError` (inexistente, diretório, nome longo demais,
    permissão) ou `ValueError` (ex.: byte nulo no caminho), a string
    original é usada como conteúdo literal.

    Args:
        source (Union[str, Path]): Caminho ou conteúdo literal.

    Returns:
        SourceText: Texto resolvido e sua origem.
    """
    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        return SourceText(
            text=str(source),
            origin=LITERAL,
            read_error=f"{type(exc).__name__}: {exc}",
        )

    return SourceText(text=text, origin=FILE, path=str(path))


def default_config_path(executable: Optional[Union[str, Path]] = None) -> Path:
    """
    Caminho convencional da configuração default de um executável.

    Convenção: `<diretório-do-executável>/conf/<nome-do-executável>.json.default`

    Args:
        executable: Caminho do executável. Quando omitido, usa `sys.argv[0]`
            (ou `sys.executable` se argv estiver vazio).

    Returns:
        Path: Caminho absoluto do arquivo default esperado.
    """
    if executable is None:
        executable = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable

    exe = Path(executable).resolve()
    return exe.parent / DEFAULT_CONF_DIR / f"{exe.stem}{DEFAULT_CONF_SUFFIX}"
