# src/atlas_configmap/core/schema/__init__.py
"""
Schema de tipos de configuração.

Componentes:
    - markers    → ConfigKey, Comment, Ignore, Changeable e `@changeable`
    - types      → classificação de tipos (escalar, container, objeto)
    - fields     → walker de campos (`describe_fields`)
    - paths      → descoberta de caminhos pertencentes ao usuário
"""

from .paths import changeable_paths
from .fields import FieldDescriptor, describe_fields, mapped_fields
from .markers import Changeable, Comment, ConfigKey, Ignore, changeable

__all__ = [
    "Changeable",
    "Comment",
    "ConfigKey",
    "FieldDescriptor",
    "Ignore",
    "changeable",
    "changeable_paths",
    "describe_fields",
    "mapped_fields",
]
