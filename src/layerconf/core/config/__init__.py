# src/layerconf/core/config/__init__.py

"""
Camada de resolução de configuração do layerconf.

Este pacote contém as estruturas e utilitários responsáveis por adquirir,
interpretar, mesclar em camadas, decodificar e identificar configurações.

A resolução de configuração no layerconf é:
    - em camadas (default < user < cmdline)
    - determinística
    - tudo-ou-nada

Responsabilidades do pacote:
    - Aquisição de fontes (arquivo ou texto literal)
    - Remoção de comentários e parse de texto JSON/YAML
    - Merge das camadas em ordem estrita de precedência
    - Decode da árvore final no tipo alvo (codec por capacidade)
    - Hash canônico e trace estruturado para rastreabilidade

Invariantes:
    - A configuração default é obrigatória e sempre válida
    - Falhas de estágio são fatais e identificam a camada de origem
    - Ausência de user ou cmdline nunca é erro

Limites explícitos:
    - Não faz parse de argumentos de processo
    - Não persiste configuração
"""

from .loader import Resolution, resolve, resolve_tree
from .sources import SourceText, read_source, default_config_path
from .codecs import (
    TreeCodec,
    TreeSerializable,
    SelfCodec,
    PydanticCodec,
    codec_for,
    parse_text,
    strip_comments,
)
from .hashing import compute_config_hash
from .trace import ResolutionTrace
from .errors import (
    ConfigError,
    DefaultUnreadableOrInvalidError,
    UserInvalidError,
    EncodeFailureError,
    DecodeFailureError,
    UnsupportedConfigFormatError,
)

__all__ = [
    "Resolution",
    "resolve",
    "resolve_tree",
    "SourceText",
    "read_source",
    "default_config_path",
    "TreeCodec",
    "TreeSerializable",
    "SelfCodec",
    "PydanticCodec",
    "codec_for",
    "parse_text",
    "strip_comments",
    "compute_config_hash",
    "ResolutionTrace",
    "ConfigError",
    "DefaultUnreadableOrInvalidError",
    "UserInvalidError",
    "EncodeFailureError",
    "DecodeFailureError",
    "UnsupportedConfigFormatError",
]
