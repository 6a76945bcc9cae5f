# src/atlas_configmap/__init__.py
"""
Atlas ConfigMap: mapeamento entre grafos de objetos tipados e arquivos YAML.

Aplicações que embarcam uma configuração default junto ao código precisam
combiná-la, sem destruir edições, com o arquivo customizado pelo usuário.
Este pacote resolve esse problema:

    - carrega defaults e o arquivo atual do usuário
    - completa o arquivo com defaults ausentes, respeitando subárvores do usuário
    - materializa o documento no tipo de configuração declarado
    - salva o objeto de volta em YAML, com comentários e chaves declaradas

Arquitetura em alto nível:
    - core.document → documento, loader YAML e merge
    - core.schema   → walker de campos e marcadores
    - core.codecs   → tipos customizados
    - core.mapping  → materializer e serializer
    - mapper        → fachada `ConfigMapper`
    - language      → configurações por idioma

Limites explícitos:
    - Apenas documentos em árvore (mapeamentos, sequências, escalares)
    - Não é um framework genérico de serialização
"""

from .core.codecs import CodecRegistry, ConfigCodec
from .core.document import ConfigNode
from .core.dynamic import DynamicConfig
from .core.errors import (
    ConfigError,
    ConfigIOError,
    ConfigParseError,
    ConstructionError,
    DuplicateCodecError,
    EnumMappingError,
    InvalidConfigRootTypeError,
    SerializationError,
    UnsupportedContainerError,
    ValueCoercionError,
)
from .core.schema import Changeable, Comment, ConfigKey, Ignore, changeable
from .core.settings import MapperSettings
from .language import LanguageConfig
from .mapper import ConfigMapper

__all__ = [
    "Changeable",
    "CodecRegistry",
    "Comment",
    "ConfigCodec",
    "ConfigError",
    "ConfigIOError",
    "ConfigKey",
    "ConfigMapper",
    "ConfigNode",
    "ConfigParseError",
    "ConstructionError",
    "DuplicateCodecError",
    "DynamicConfig",
    "EnumMappingError",
    "Ignore",
    "InvalidConfigRootTypeError",
    "LanguageConfig",
    "MapperSettings",
    "SerializationError",
    "UnsupportedContainerError",
    "ValueCoercionError",
    "changeable",
]
