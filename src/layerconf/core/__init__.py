# src/layerconf/core/__init__.py
"""
Core do layerconf.

Este pacote contém a implementação canônica da resolução de configuração
em camadas, reunindo:

    - tree   → modelo TreeValue e álgebra de merge/diff (puro, sem I/O)
    - config → aquisição de fontes, codecs, precedência e decode tipado

Princípios fundamentais:
    - Nenhuma decisão silenciosa: todo fallback é explícito e rastreado
    - A álgebra de árvores não depende da camada de configuração
    - Erros carregam payloads estruturados e estáveis
"""
