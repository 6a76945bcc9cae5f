# src/atlas_configmap/core/mapping/__init__.py
"""
Conversão entre documentos e grafos de objetos.

Componentes:
    - coercion     → coerção de valores escalares
    - containers   → construção de containers pelo tipo declarado
    - materializer → documento merged → instância tipada
    - serializer   → instância tipada → texto YAML comentado
"""

from .coercion import coerce
from .containers import build_container, empty_container
from .materializer import Materializer
from .serializer import Serializer

__all__ = ["Materializer", "Serializer", "build_container", "coerce", "empty_container"]
