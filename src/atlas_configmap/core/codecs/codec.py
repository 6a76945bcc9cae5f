# src/atlas_configmap/core/codecs/codec.py
"""
Contrato de codecs de tipos customizados.

Um codec ensina o engine a converter um tipo específico de/para o
documento. É o ponto de extensão para tipos sem construtor sem argumentos
ou com layout próprio no arquivo.

Exemplo:

    class DurationCodec(ConfigCodec[timedelta]):
        target_type = timedelta

        def decode(self, node: ConfigNode) -> timedelta:
            return timedelta(seconds=node.get_int("seconds", 0))

        def encode(self, obj: timedelta, node: ConfigNode) -> None:
            node.set("seconds", int(obj.total_seconds()))

Quando o valor armazenado não é um mapeamento, o node recebido em
`decode` contém uma única entrada: a chave do campo (ou "value", para
elementos de containers) apontando para o valor bruto.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Type, TypeVar

from ..document.node import ConfigNode

T = TypeVar("T")


class ConfigCodec(ABC, Generic[T]):
    """Estratégia de encode/decode para um único tipo alvo."""

    target_type: ClassVar[Type[Any]]

    @abstractmethod
    def decode(self, node: ConfigNode) -> T:
        """Constrói o valor a partir do node."""

    @abstractmethod
    def encode(self, obj: T, node: ConfigNode) -> None:
        """Escreve o valor no node recebido."""

    def handles(self, tp: Any) -> bool:
        # Correspondência exata: subclasses do tipo alvo não são cobertas.
        return tp is self.target_type
