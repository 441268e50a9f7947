# tests/conftest.py
"""
Fixtures compartilhados para testes do layerconf.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos de configuração default e de usuário (JSON com comentários)
- conteúdo YAML equivalente ao default
- helpers para materializar configurações em arquivos temporários

Decisões arquiteturais:
    - Conteúdos são fornecidos como string, o teste decide se vira arquivo
    - Dados retornados são determinísticos e isolados
    - Nenhuma fixture executa resolução real

Limites explícitos:
    - Não substituir testes de integração do loader
    - Não conter lógica condicional complexa
"""

from pathlib import Path

import pytest


# =====================================================
# Conteúdos de camadas
# =====================================================

@pytest.fixture
def defaults_json_text() -> str:
    """
    Fixture que fornece uma configuração default em JSON com comentários.

    Representa o conteúdo típico de um arquivo `<exe>.json.default`:
    base completa sobre a qual user e cmdline são aplicados.

    Invariantes:
        - JSON sintaticamente válido após remoção de comentários
        - Contém objetos aninhados, arrays e escalares

    Returns:
        str: Conteúdo JSON (com comentários) da configuração default.
    """
    return """\
{
    // servidor HTTP
    "server": {
        "host": "0.0.0.0",
        "port": 8080,
        "tls": false
    },
    /* destinos de log */
    "log": {
        "level": "info",
        "targets": ["stdout", "file"]
    },
    "workers": 4   # número de workers
}
"""


@pytest.fixture
def user_json_text() -> str:
    """
    Fixture que fornece uma configuração de usuário (override) em JSON.

    Usada para validar:
    - sobrescrita de escalares aninhados
    - substituição integral de arrays
    - remoção de chave via null (tombstone)

    Returns:
        str: Conteúdo JSON da configuração de usuário.
    """
    return """\
{
    "server": {"port": 9090, "tls": null},
    "log": {"targets": ["syslog"]}
}
"""


@pytest.fixture
def defaults_yaml_text() -> str:
    """Mesma configuração default de `defaults_json_text`, em YAML."""
    return """\
server:
  host: 0.0.0.0
  port: 8080
  tls: false
log:
  level: info
  targets: [stdout, file]
workers: 4
"""


@pytest.fixture
def write_file(tmp_path: Path):
    """
    Fixture que retorna um helper para gravar conteúdos em `tmp_path`.

    Returns:
        Callable[[str, str], Path]: `write_file(nome, conteudo) -> Path`.
    """

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
