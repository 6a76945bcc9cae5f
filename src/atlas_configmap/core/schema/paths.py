# src/atlas_configmap/core/schema/paths.py
"""
Descoberta de caminhos changeable a partir do schema.

Um caminho changeable é uma subárvore do documento cujas chaves vêm
exclusivamente do arquivo do usuário (ex.: uma tabela de entradas
nomeadas). O merge nunca preenche nem poda essas subárvores.

Política de descoberta (v1):
    - Campo com `Changeable()` → seu caminho completo é marcado
    - Tipo com `@changeable` → o caminho por onde ele é alcançado é marcado
      (nunca a raiz)
    - Mapeamentos recursam no tipo do valor; coleções no tipo do elemento;
      objetos aninhados no próprio tipo
    - Tipos de item escalares nunca são visitados

Decisões arquiteturais:
    - Guarda de ciclo por caminho: um tipo presente na pilha de recursão
      atual é pulado, mas pode ser revisitado por outro caminho
    - Campos ignorados não participam da descoberta
"""

from __future__ import annotations

from typing import FrozenSet, Set, Tuple

from ..document.merge import dotted
from .fields import describe_fields
from .markers import is_changeable_type
from .types import innermost_item_type, is_object_type


def changeable_paths(root: type) -> FrozenSet[str]:
    """
    Calcula o conjunto de caminhos pontilhados changeable de `root`.

    Args:
        root: Tipo raiz da configuração.

    Returns:
        FrozenSet[str]: Caminhos exatos a serem preservados pelo merge.
    """
    out: Set[str] = set()
    _collect(root, "", out, ())
    return frozenset(out)


def _collect(tp: type, path: str, out: Set[str], stack: Tuple[type, ...]) -> None:
    if not is_object_type(tp) or tp in stack:
        return
    if path and is_changeable_type(tp):
        out.add(path)

    stack = stack + (tp,)
    for field in describe_fields(tp):
        if field.ignored:
            continue
        full = dotted(path, field.key)
        if field.changeable:
            out.add(full)

        if field.is_container:
            item = innermost_item_type(field.item_type)
            if item is not None and is_object_type(item):
                _collect(item, full, out, stack)
            continue

        if is_object_type(field.type):
            _collect(field.type, full, out, stack)
