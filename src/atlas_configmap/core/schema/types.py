# src/atlas_configmap/core/schema/types.py
"""
Classificação de tipos declarados em anotações.

Todo tipo declarado cai em exatamente uma categoria:
    - escalar  → str, int, float, bool e subclasses de Enum
    - container → mapeamentos e coleções (exceto str/bytes)
    - objeto   → qualquer outra classe concreta
    - sem tipo → Any, TypeVar, uniões heterogêneas (valores passam sem conversão)
"""

from __future__ import annotations

import types
from collections.abc import Collection, Mapping
from enum import Enum
from typing import Annotated, Any, Optional, Tuple, TypeVar, Union, get_args, get_origin

_SCALAR_TYPES = (str, int, float, bool)
_TEXT_TYPES = (str, bytes, bytearray)
_UNION_TYPES = (Union, getattr(types, "UnionType", Union))


def strip_annotated(tp: Any) -> Tuple[Any, Tuple[Any, ...]]:
    """Separa `Annotated[T, *meta]` em `(T, meta)`."""
    if get_origin(tp) is Annotated:
        args = get_args(tp)
        return args[0], tuple(args[1:])
    return tp, ()


def unwrap_optional(tp: Any) -> Any:
    """`Optional[T]` → `T`. Outras uniões são mantidas."""
    if get_origin(tp) in _UNION_TYPES:
        args = [a for a in get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def plain_type(tp: Any) -> Optional[Any]:
    """
    Normaliza um tipo declarado removendo `Annotated` e `Optional`.

    Retorna None para tipos sem informação útil (Any, TypeVar, uniões).
    """
    if tp is None:
        return None
    tp, _ = strip_annotated(tp)
    tp = unwrap_optional(tp)
    tp, _ = strip_annotated(tp)
    if tp is Any or isinstance(tp, TypeVar) or get_origin(tp) in _UNION_TYPES:
        return None
    return tp


def is_enum_type(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, Enum)


def is_scalar_type(tp: Any) -> bool:
    return tp in _SCALAR_TYPES or is_enum_type(tp)


def container_origin(tp: Any) -> Optional[type]:
    """Classe de container de `tp` (`List[int]` → `list`), ou None."""
    origin = get_origin(tp) or tp
    if not isinstance(origin, type) or is_enum_type(origin):
        return None
    if issubclass(origin, _TEXT_TYPES):
        return None
    if issubclass(origin, (Mapping, Collection)):
        return origin
    return None


def is_mapping_type(tp: Any) -> bool:
    origin = container_origin(tp)
    return origin is not None and issubclass(origin, Mapping)


def container_parameters(tp: Any) -> Tuple[Optional[Any], Optional[Any]]:
    """
    Parâmetros genéricos de um container declarado.

    Retorna `(tipo_da_chave, tipo_do_item)`:
        - `Dict[K, V]`          → (K, V)
        - `List[E]`, `Set[E]`   → (None, E)
        - `Tuple[E, ...]`       → (None, E)
        - container sem args    → (None, None)
    """
    origin = container_origin(tp)
    args = get_args(tp)
    if origin is None or not args:
        return None, None
    if issubclass(origin, Mapping):
        if len(args) == 2:
            return plain_type(args[0]), plain_type(args[1])
        return None, None
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return None, plain_type(args[0])
        return None, None
    if len(args) == 1:
        return None, plain_type(args[0])
    return None, None


def is_object_type(tp: Any) -> bool:
    """Classe concreta que não é escalar nem container."""
    return (
        isinstance(tp, type)
        and tp is not object
        and tp is not type(None)
        and not is_scalar_type(tp)
        and container_origin(tp) is None
        and not issubclass(tp, _TEXT_TYPES)
    )


def innermost_item_type(tp: Any) -> Optional[Any]:
    """Desce por containers aninhados até o tipo do item mais interno."""
    item = tp
    while item is not None and container_origin(item) is not None:
        _, item = container_parameters(item)
    return item
