# src/atlas_configmap/core/document/__init__.py
"""
Modelo de documento do Atlas ConfigMap.

Um documento é o `dict` produzido pelo parse de um arquivo YAML:
chaves string mapeando escalares, dicionários aninhados ou listas.

Componentes:
    - node   → `ConfigNode`, visão ordenada e tipada de um mapeamento
    - loader → parse, leitura e escrita de arquivos YAML
    - merge  → merge não destrutivo de defaults no documento atual
"""

from .loader import ensure_file, parse_document, read_document, read_resource, write_text
from .merge import dotted, merge_defaults
from .node import ConfigNode

__all__ = [
    "ConfigNode",
    "dotted",
    "ensure_file",
    "merge_defaults",
    "parse_document",
    "read_document",
    "read_resource",
    "write_text",
]
