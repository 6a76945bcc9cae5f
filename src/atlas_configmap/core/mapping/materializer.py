# src/atlas_configmap/core/mapping/materializer.py
"""
Materializer canônico: documento merged → grafo de objetos tipado.

Este módulo percorre o schema do tipo alvo e constrói, recursivamente,
a instância correspondente ao documento já completado com os defaults.

Política por campo (v1), na ordem de declaração:
    1. codec registrado para o tipo do campo → decode tem prioridade total
    2. container sem entrada no documento → container vazio do tipo declarado
    3. container com entrada → novo container, elementos convertidos um a um
    4. escalar com valor → coerção (numérica, enum por nome, bool, texto)
    5. objeto aninhado com mapeamento → construção e materialização recursivas

Decisões arquiteturais:
    - O tipo é instanciado sem argumentos; tipos aninhados no corpo da
      classe dona que exigem um único argumento recebem a instância dona
    - Ausência de valor não é erro: o atributo mantém o default da classe
      ou recebe o valor zero do tipo (0, 0.0, False, None)
    - Valor escalar onde o schema declara um objeto aninhado é erro de parse
    - Qualquer falha aborta a materialização da raiz inteira

Invariantes:
    - O documento de entrada nunca é mutado
    - Containers materializados são sempre instâncias novas

Limites explícitos:
    - Não lê arquivos nem aplica merge
    - Não valida regras de negócio entre campos (papel dos codecs)
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any, Dict, Optional

from ..codecs.codec import ConfigCodec
from ..codecs.registry import CodecRegistry
from ..document.node import ConfigNode
from ..dynamic import DynamicConfig
from ..errors import ConfigParseError, ConstructionError
from ..schema.fields import FieldDescriptor, mapped_fields
from ..schema.types import (
    container_origin,
    container_parameters,
    is_object_type,
    is_scalar_type,
    plain_type,
)
from .coercion import coerce
from .containers import build_container, empty_container

_SEQUENCE_VALUES = (list, tuple, set, frozenset)


class Materializer:
    """Constrói instâncias de tipos de configuração a partir de documentos."""

    def __init__(self, codecs: Optional[CodecRegistry] = None) -> None:
        self.codecs = codecs if codecs is not None else CodecRegistry()

    def materialize(self, cls: type, document: Dict[str, Any]) -> Any:
        """
        Materializa `cls` a partir do documento merged.

        Raises:
            ConstructionError: Se `cls` não puder ser instanciado e
                nenhum codec o cobrir.
            EnumMappingError: Se um texto não corresponder a um enum.
            UnsupportedContainerError: Se um container declarado não for suportado.
        """
        codec = self.codecs.find(cls)
        if codec is not None:
            return codec.decode(ConfigNode(document))

        instance = self._construct(cls, None)
        if isinstance(instance, DynamicConfig):
            instance.attach_node(ConfigNode(document))
        return self.populate(instance, cls, document)

    def populate(self, instance: Any, cls: type, mapping: Mapping) -> Any:
        for field in mapped_fields(cls):
            self._apply_field(instance, field, mapping)
        return instance

    def convert(self, raw: Any, tp: Any, parent: Any = None, where: str = "value") -> Any:
        """Converte um valor bruto do documento para o tipo declarado `tp`."""
        tp = plain_type(tp)
        if raw is None or tp is None:
            return raw

        codec = self.codecs.find(tp)
        if codec is not None:
            return self._decode(codec, raw, "value")

        origin = container_origin(tp)
        if origin is not None:
            return self._convert_container(raw, tp, origin, parent, where)

        if is_scalar_type(tp):
            return coerce(raw, tp)

        if isinstance(tp, type) and isinstance(raw, tp):
            return raw

        if is_object_type(tp):
            if not isinstance(raw, Mapping):
                raise ConfigParseError(
                    f"'{where}' deve ser um mapeamento para {tp.__qualname__}, "
                    f"recebido: {type(raw).__name__}"
                )
            instance = self._construct(tp, parent)
            return self.populate(instance, tp, raw)

        return raw

    def _apply_field(self, owner: Any, field: FieldDescriptor, mapping: Mapping) -> None:
        raw = mapping.get(field.key)

        codec = self.codecs.find(field.type)
        if codec is not None:
            if raw is None:
                self._ensure_zero(owner, field)
            else:
                setattr(owner, field.name, self._decode(codec, raw, field.key))
            return

        if field.is_container and raw is None:
            setattr(owner, field.name, empty_container(field.container))
            return

        if raw is None:
            self._ensure_zero(owner, field)
            return

        setattr(owner, field.name, self.convert(raw, field.type, owner, field.key))

    def _convert_container(self, raw: Any, tp: Any, origin: type, parent: Any, where: str) -> Any:
        key_type, item_type = container_parameters(tp)

        if issubclass(origin, Mapping):
            if not isinstance(raw, Mapping):
                raise ConfigParseError(
                    f"'{where}' deve ser um mapeamento, recebido: {type(raw).__name__}"
                )
            return build_container(
                origin,
                (
                    (self._convert_key(k, key_type), self.convert(v, item_type, parent, f"{where}.{k}"))
                    for k, v in raw.items()
                ),
            )

        if not isinstance(raw, _SEQUENCE_VALUES):
            raise ConfigParseError(
                f"'{where}' deve ser uma sequência, recebido: {type(raw).__name__}"
            )
        return build_container(origin, (self.convert(v, item_type, parent, where) for v in raw))

    @staticmethod
    def _convert_key(key: Any, key_type: Any) -> Any:
        if key_type is not None and is_scalar_type(key_type):
            return coerce(key, key_type)
        return key

    @staticmethod
    def _decode(codec: ConfigCodec[Any], raw: Any, key: str) -> Any:
        if isinstance(raw, Mapping):
            return codec.decode(ConfigNode(raw))
        return codec.decode(ConfigNode({key: raw}))

    @staticmethod
    def _ensure_zero(owner: Any, field: FieldDescriptor) -> None:
        if not hasattr(owner, field.name):
            setattr(owner, field.name, field.zero_value())

    @staticmethod
    def _construct(cls: type, parent: Any) -> Any:
        args = (parent,) if parent is not None and _is_enclosed(cls, type(parent)) else ()
        try:
            inspect.signature(cls).bind(*args)
        except TypeError as e:
            raise ConstructionError(
                f"{cls.__qualname__} não possui construtor utilizável "
                f"e nenhum codec foi registrado para o tipo: {e}"
            ) from e
        except ValueError:
            # Sem assinatura introspectável (tipos nativos): a chamada decide.
            pass
        return cls(*args)


def _is_enclosed(cls: type, owner: type) -> bool:
    """
    Indica se `cls` foi declarado no corpo de uma classe da hierarquia de
    `owner` e exige exatamente um argumento posicional (a instância dona).
    """
    enclosing = cls.__qualname__.rpartition(".")[0]
    if not any(
        base.__qualname__ == enclosing and base.__module__ == cls.__module__
        for base in owner.__mro__
    ):
        return False
    try:
        params = inspect.signature(cls).parameters.values()
    except (TypeError, ValueError):
        return False
    required = [
        p
        for p in params
        if p.default is inspect.Parameter.empty
        and p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    return len(required) == 1
