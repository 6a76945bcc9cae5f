# src/atlas_configmap/core/schema/markers.py
"""
Marcadores de campo e de tipo do schema de configuração.

Marcadores de campo são declarados como metadados de `typing.Annotated`:

    class ServerConfig:
        port: Annotated[int, ConfigKey("listen-port"), Comment("Porta TCP")] = 8080
        users: Annotated[Dict[str, User], Changeable()]
        cache: Annotated[Dict[str, str], Ignore()]

O marcador de tipo `@changeable` declara que toda subárvore onde o tipo
aparece pertence ao usuário.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, TypeVar

T = TypeVar("T", bound=type)

_CHANGEABLE_ATTR = "__config_changeable__"


@dataclass(frozen=True)
class ConfigKey:
    """Nome explícito da chave no documento (usado literalmente)."""

    value: str


class Comment:
    """Linhas de comentário emitidas acima do campo a cada save."""

    __slots__ = ("lines",)

    def __init__(self, *lines: str) -> None:
        self.lines: Tuple[str, ...] = tuple(lines)

    def __repr__(self) -> str:
        return f"Comment{self.lines!r}"


@dataclass(frozen=True)
class Ignore:
    """Exclui o campo da materialização e da serialização."""


@dataclass(frozen=True)
class Changeable:
    """Marca a subárvore do campo como pertencente ao usuário."""


def changeable(cls: T) -> T:
    """Decorator de classe: toda ocorrência do tipo é uma subárvore do usuário."""
    setattr(cls, _CHANGEABLE_ATTR, True)
    return cls


def is_changeable_type(tp: object) -> bool:
    # Não herdado: apenas a classe decorada é marcada.
    return isinstance(tp, type) and bool(vars(tp).get(_CHANGEABLE_ATTR, False))
