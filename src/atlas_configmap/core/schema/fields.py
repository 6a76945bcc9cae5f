# src/atlas_configmap/core/schema/fields.py
"""
Walker canônico do schema de tipos de configuração.

Este módulo deriva, uma única vez por tipo, a sequência ordenada de
`FieldDescriptor` que orienta merge, materialização e serialização.

Política de descoberta (v1):
    - A hierarquia é percorrida do tipo mais derivado para o mais ancestral
    - Dentro de cada classe, os campos seguem a ordem de declaração
    - Um nome já visto em nível mais derivado sombreia o do ancestral
    - Campos `ClassVar` e `Final` (constantes) nunca são mapeados
    - Campos do tipo `ConfigNode` são reservados à raiz dinâmica

Decisões arquiteturais:
    - Campos marcados com `Ignore()` continuam descritos (`ignored=True`);
      cabe ao chamador filtrá-los
    - `Optional[T]` é tratado como `T`
    - Parâmetros genéricos ausentes tornam o container "sem tipo"

Invariantes:
    - O resultado é imutável e cacheado por tipo
    - A ordem do resultado define a ordem do arquivo salvo

Limites explícitos:
    - Não lê documentos
    - Não instancia tipos
    - Não consulta codecs
"""

from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, ClassVar, Dict, Final, List, Optional, Set, Tuple, get_origin

from ..document.node import ConfigNode
from ..errors import ConstructionError
from .markers import Changeable, Comment, ConfigKey, Ignore
from .types import (
    container_origin,
    container_parameters,
    is_mapping_type,
    is_scalar_type,
    strip_annotated,
    unwrap_optional,
)

_CONSTANT_FORMS = (ClassVar, Final)
_ZERO_VALUES: Dict[Any, Any] = {int: 0, float: 0.0, bool: False}


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Metadados de um campo mapeado.

    Campos:
    - name: nome do atributo Python
    - key: chave no documento (ConfigKey ou o próprio nome)
    - type: tipo declarado, sem Annotated/Optional
    - owner: classe que declara o campo
    - container: classe de container (list, dict, ...) ou None
    - key_type / item_type: parâmetros genéricos do container (None = sem tipo)
    - ignored: excluído de materialização e serialização
    - changeable: subárvore pertencente ao usuário
    - comments: linhas de comentário emitidas no save
    """

    name: str
    key: str
    type: Any
    owner: type
    container: Optional[type] = None
    key_type: Any = None
    item_type: Any = None
    ignored: bool = False
    changeable: bool = False
    comments: Tuple[str, ...] = ()

    @property
    def is_container(self) -> bool:
        return self.container is not None

    @property
    def is_mapping(self) -> bool:
        return self.container is not None and is_mapping_type(self.container)

    @property
    def is_scalar(self) -> bool:
        return is_scalar_type(self.type)

    def zero_value(self) -> Any:
        return _ZERO_VALUES.get(self.type)


def _is_constant(hint: Any) -> bool:
    return hint in _CONSTANT_FORMS or get_origin(hint) in _CONSTANT_FORMS


def _own_hints(cls: type) -> List[Tuple[str, Any]]:
    own = inspect.get_annotations(cls)
    if not own:
        return []
    try:
        resolved = typing.get_type_hints(cls, include_extras=True)
    except Exception as e:  # noqa: BLE001
        raise ConstructionError(
            f"Não foi possível resolver as anotações de {cls.__qualname__}: {e}"
        ) from e
    return [(name, resolved.get(name, own[name])) for name in own]


def _describe(name: str, hint: Any, owner: type) -> FieldDescriptor:
    declared, metadata = strip_annotated(hint)
    declared = unwrap_optional(declared)
    declared, inner = strip_annotated(declared)
    metadata = metadata + inner

    key = name
    comments: List[str] = []
    ignored = False
    user_owned = False
    for marker in metadata:
        if isinstance(marker, ConfigKey):
            key = marker.value
        elif isinstance(marker, Comment):
            comments.extend(marker.lines)
        elif isinstance(marker, Ignore):
            ignored = True
        elif isinstance(marker, Changeable):
            user_owned = True

    key_type, item_type = container_parameters(declared)
    return FieldDescriptor(
        name=name,
        key=key,
        type=declared,
        owner=owner,
        container=container_origin(declared),
        key_type=key_type,
        item_type=item_type,
        ignored=ignored,
        changeable=user_owned,
        comments=tuple(comments),
    )


@lru_cache(maxsize=None)
def describe_fields(cls: type) -> Tuple[FieldDescriptor, ...]:
    """
    Retorna os descritores de campo de `cls`, incluindo os herdados.

    Args:
        cls: Tipo de configuração.

    Returns:
        Tuple[FieldDescriptor, ...]: Descritores na ordem de processamento.

    Raises:
        ConstructionError: Se as anotações de alguma classe não puderem
            ser resolvidas.
    """
    seen: Set[str] = set()
    out: List[FieldDescriptor] = []
    for base in cls.__mro__:
        if base is object:
            continue
        for name, hint in _own_hints(base):
            if name in seen:
                continue
            seen.add(name)
            if _is_constant(hint):
                continue
            descriptor = _describe(name, hint, base)
            if descriptor.type is ConfigNode:
                continue
            out.append(descriptor)
    return tuple(out)


def mapped_fields(cls: type) -> Tuple[FieldDescriptor, ...]:
    """Descritores de `cls` sem os campos ignorados."""
    return tuple(f for f in describe_fields(cls) if not f.ignored)
