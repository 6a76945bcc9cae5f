# src/atlas_configmap/core/document/merge.py
"""
Merge canônico de defaults no documento atual.

Este módulo implementa a política oficial pela qual o Atlas ConfigMap
completa o arquivo do usuário com os defaults embarcados na aplicação,
sem jamais sobrescrever valores já presentes.

Política de merge (v1):
    - chave ausente no atual → cópia profunda do default
    - dict + dict → merge recursivo por chave
    - list + list → lista atual vazia adota a lista default; lista não vazia é atômica
    - escalar presente → preservado
    - caminho changeable → subárvore intocada (nem preenchida, nem podada)

Princípios fundamentais:
    - O valor do usuário sempre vence
    - O documento atual é mutado in-place; os defaults nunca são mutados
    - Caminhos são comparados por igualdade exata de chaves pontilhadas

Invariantes:
    - Toda chave do default ausente no atual existe após o merge, em qualquer
      profundidade, exceto dentro de um caminho changeable
    - Nenhuma chave é removida do documento atual

Limites explícitos:
    - Não carrega arquivos
    - Não conhece o schema do tipo alvo (recebe os caminhos já calculados)
    - Não realiza coerção de tipos
"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import AbstractSet, Any, Dict

logger = logging.getLogger(__name__)


def dotted(path: str, key: str) -> str:
    """Concatena `key` ao caminho pontilhado `path`."""
    return f"{path}.{key}" if path else key


def merge_defaults(
    defaults: Dict[str, Any],
    current: Dict[str, Any],
    changeable_paths: AbstractSet[str] = frozenset(),
    path: str = "",
) -> None:
    """
    Completa `current` com as chaves de `defaults` que ainda não existem.

    Decisões arquiteturais:
        - O merge muta `current` in-place e não retorna valor
        - Listas não são mescladas elemento a elemento
        - Um caminho marcado como changeable pertence ao usuário

    Args:
        defaults: Documento de defaults (não é mutado).
        current: Documento atual do usuário (mutado in-place).
        changeable_paths: Caminhos pontilhados de subárvores do usuário.
        path: Caminho pontilhado do nível atual (uso recursivo).
    """
    if not defaults or current is None:
        return

    for key, default_value in defaults.items():
        full_path = dotted(path, str(key))

        if key not in current:
            current[key] = deepcopy(default_value)
            logger.debug("Default aplicado em '%s'", full_path)
            continue

        if full_path in changeable_paths:
            continue

        current_value = current[key]

        if isinstance(default_value, dict) and isinstance(current_value, dict):
            merge_defaults(default_value, current_value, changeable_paths, full_path)
            continue

        if isinstance(default_value, list) and isinstance(current_value, list):
            if not current_value and default_value:
                current[key] = deepcopy(default_value)
                logger.debug("Lista vazia preenchida com defaults em '%s'", full_path)
