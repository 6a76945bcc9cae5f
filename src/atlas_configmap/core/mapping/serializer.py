# src/atlas_configmap/core/mapping/serializer.py
"""
Serializer canônico: grafo de objetos → texto YAML comentado.

A saída segue exatamente a ordem de declaração dos campos do tipo, e não a
ordem do arquivo carregado anteriormente. Mudanças estruturais no schema
reordenam o arquivo no próximo save sem etapa de migração.

Política de serialização (v1):
    - campos ignorados, valores None e o node dinâmico não são emitidos
    - comentários declarados são emitidos imediatamente acima do campo
    - cada entrada de topo é emitida por `yaml.safe_dump` em estilo bloco
    - o valor é achatado por `to_plain` antes do dump

Achatamento (`to_plain`):
    - tipos com codec → encode em um ConfigNode, depois achatado
    - Enum → nome da constante
    - escalares (e datas) → inalterados
    - mapeamentos → chave → valor achatado
    - sequências, tuplas e deques → listas; sets → listas ordenadas quando possível
    - objetos → mapeamento chave → valor sobre seus próprios campos
    - objetos sem campos mapeados e sem codec (ex.: Path, UUID) → `SerializationError`
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Collection, Mapping
from enum import Enum
from typing import Any, Dict, List, Optional

import yaml  # PyYAML

from ..codecs.registry import CodecRegistry
from ..document.node import ConfigNode
from ..errors import SerializationError
from ..schema.fields import mapped_fields
from ..settings import DEFAULT_SETTINGS, MapperSettings

_PASSTHROUGH = (str, int, float, bool, bytes, dt.date, dt.datetime)


class Serializer:
    """Converte instâncias de configuração em texto YAML."""

    def __init__(
        self,
        codecs: Optional[CodecRegistry] = None,
        settings: MapperSettings = DEFAULT_SETTINGS,
    ) -> None:
        self.codecs = codecs if codecs is not None else CodecRegistry()
        self.settings = settings

    def serialize(self, instance: Any) -> str:
        """Retorna o texto YAML completo de `instance`."""
        if self.codecs.find(type(instance)) is not None:
            plain = self.to_plain(instance)
            return "".join(self._dump_entry(key, value) for key, value in plain.items())

        chunks: List[str] = []
        for field in mapped_fields(type(instance)):
            value = getattr(instance, field.name, None)
            if value is None:
                continue
            for line in field.comments:
                chunks.append(f"{self.settings.comment_prefix}{line}\n")
            chunks.append(self._dump_entry(field.key, self.to_plain(value)))
        return "".join(chunks)

    def to_plain(self, value: Any) -> Any:
        if value is None:
            return None

        codec = self.codecs.find(type(value))
        if codec is not None:
            node = ConfigNode()
            codec.encode(value, node)
            return self.to_plain(node.as_dict())

        if isinstance(value, Enum):
            return value.name
        if isinstance(value, _PASSTHROUGH):
            return value
        if isinstance(value, ConfigNode):
            return self.to_plain(value.as_dict())
        if isinstance(value, Mapping):
            return {_plain_key(k): self.to_plain(v) for k, v in value.items()}
        if isinstance(value, (set, frozenset)):
            return _sorted_if_possible([self.to_plain(v) for v in value])
        if isinstance(value, Collection):
            return [self.to_plain(v) for v in value]

        fields = mapped_fields(type(value))
        if not fields:
            raise SerializationError(
                f"Valor do tipo {type(value).__qualname__} não possui campos mapeados "
                "nem codec registrado"
            )

        out: Dict[str, Any] = {}
        for field in fields:
            field_value = getattr(value, field.name, None)
            if field_value is None:
                continue
            out[field.key] = self.to_plain(field_value)
        return out

    def _dump_entry(self, key: str, plain: Any) -> str:
        return yaml.safe_dump({key: plain}, **self.settings.dump_options())


def _plain_key(key: Any) -> Any:
    return key.name if isinstance(key, Enum) else key


def _sorted_if_possible(items: List[Any]) -> List[Any]:
    try:
        return sorted(items)
    except TypeError:
        return items
