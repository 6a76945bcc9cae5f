# src/atlas_configmap/core/mapping/containers.py
"""
Construção de containers a partir do tipo declarado.

Cada classe de container declarada (inclusive as abstratas de
`collections.abc`) é associada ao tipo concreto mais próximo. Tipos sem
estratégia conhecida (ex.: `defaultdict`, `Counter`) são rejeitados com
`UnsupportedContainerError`.
"""

from __future__ import annotations

import collections
import collections.abc as abc
from typing import Any, Callable, Dict, Iterable

from ..errors import UnsupportedContainerError

_CONCRETE: Dict[type, Callable[[Iterable[Any]], Any]] = {
    list: list,
    abc.Sequence: list,
    abc.MutableSequence: list,
    abc.Collection: list,
    tuple: tuple,
    collections.deque: collections.deque,
    set: set,
    abc.Set: set,
    abc.MutableSet: set,
    frozenset: frozenset,
    dict: dict,
    abc.Mapping: dict,
    abc.MutableMapping: dict,
    collections.OrderedDict: collections.OrderedDict,
}


def _factory(origin: type) -> Callable[[Iterable[Any]], Any]:
    try:
        return _CONCRETE[origin]
    except KeyError:
        raise UnsupportedContainerError(
            f"Tipo de container sem estratégia de construção: {origin.__qualname__}"
        ) from None


def build_container(origin: type, items: Iterable[Any]) -> Any:
    """
    Constrói um container do tipo `origin` com `items`.

    Para mapeamentos, `items` é um iterável de pares (chave, valor).

    Raises:
        UnsupportedContainerError: Se `origin` não possuir estratégia conhecida.
    """
    return _factory(origin)(items)


def empty_container(origin: type) -> Any:
    return build_container(origin, ())
