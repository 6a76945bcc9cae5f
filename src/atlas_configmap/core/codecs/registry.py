# src/atlas_configmap/core/codecs/registry.py
"""
Registro ordenado de codecs.

Este módulo define o `CodecRegistry`, consultado pelo materializer e pelo
serializer antes de qualquer lógica genérica de escalares, containers ou
objetos.

Decisões arquiteturais:
    - A busca é linear e respeita a ordem de registro
    - A correspondência é por identidade exata do tipo alvo
    - Um segundo codec para o mesmo tipo é rejeitado no registro

Invariantes:
    - Cada tipo alvo possui no máximo um codec
    - A ordem de iteração reflete exatamente a ordem de registro

Limites explícitos:
    - Não converte valores
    - Não resolve herança entre tipos alvo
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional

from ..errors import DuplicateCodecError
from .codec import ConfigCodec

logger = logging.getLogger(__name__)


@dataclass
class CodecRegistry:
    """Lista ordenada de codecs indexada pelo tipo alvo."""

    _codecs: List[ConfigCodec[Any]] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def of(cls, codecs: Iterable[ConfigCodec[Any]] = ()) -> "CodecRegistry":
        registry = cls()
        for codec in codecs:
            registry.register(codec)
        return registry

    def register(self, codec: ConfigCodec[Any]) -> None:
        target = getattr(codec, "target_type", None)
        if not isinstance(target, type):
            raise TypeError("codec.target_type must be a class")

        if self.find(target) is not None:
            raise DuplicateCodecError(f"Codec duplicado para o tipo: {target.__qualname__}")

        self._codecs.append(codec)
        logger.debug("Codec registrado para %s", target.__qualname__)

    def find(self, tp: Any) -> Optional[ConfigCodec[Any]]:
        for codec in self._codecs:
            if codec.handles(tp):
                return codec
        return None

    def __contains__(self, tp: object) -> bool:
        return self.find(tp) is not None

    def __iter__(self) -> Iterator[ConfigCodec[Any]]:
        return iter(self._codecs)

    def __len__(self) -> int:
        return len(self._codecs)
