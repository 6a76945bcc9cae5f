# src/atlas_configmap/mapper.py
"""
ConfigMapper: fachada de carregamento e persistência de configuração.

Fluxo canônico:

    mapper = (
        ConfigMapper.of(AppConfig)
        .file("config/app.yml")
        .load_resource("myapp.resources", "app.yml")
        .with_codec(DurationCodec())
    )
    config = mapper.build()
    config.retries = 5
    mapper.save(config)

`build()`:
    1. lê o arquivo do usuário (a cada chamada, sem cache)
    2. calcula os caminhos changeable a partir do schema
    3. aplica o merge dos defaults no documento atual
    4. materializa a instância

Concorrência:
    Um mapper não é sincronizado internamente. Chamadas concorrentes a
    `build`/`save` sobre o mesmo mapper ou arquivo devem ser serializadas
    pelo chamador.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from pathlib import Path
from typing import IO, Any, Dict, Generic, Mapping, Optional, Type, TypeVar, Union

from .core.codecs.codec import ConfigCodec
from .core.codecs.registry import CodecRegistry
from .core.document.loader import (
    ensure_file,
    parse_document,
    read_document,
    read_resource,
    write_text,
)
from .core.document.merge import merge_defaults
from .core.errors import ConfigIOError
from .core.mapping.materializer import Materializer
from .core.mapping.serializer import Serializer
from .core.schema.paths import changeable_paths
from .core.settings import DEFAULT_SETTINGS, MapperSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")

DefaultsSource = Union[None, Mapping[str, Any], str, Path, IO[Any]]


class ConfigMapper(Generic[T]):
    """Liga um tipo de configuração a um arquivo YAML e a seus defaults."""

    def __init__(self, target: Type[T], settings: Optional[MapperSettings] = None) -> None:
        self.target = target
        self.settings = settings or DEFAULT_SETTINGS
        self.codecs = CodecRegistry()
        self._path: Optional[Path] = None
        self._defaults: Dict[str, Any] = {}
        self._document: Dict[str, Any] = {}

    @classmethod
    def of(cls, target: Type[T], settings: Optional[MapperSettings] = None) -> "ConfigMapper[T]":
        return cls(target, settings)

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def defaults(self) -> Dict[str, Any]:
        return self._defaults

    def file(self, path: Union[str, Path]) -> "ConfigMapper[T]":
        """Associa o arquivo do usuário, criando-o (e os diretórios pais) se ausente."""
        self._path = ensure_file(path)
        return self

    def load_defaults(self, source: DefaultsSource) -> "ConfigMapper[T]":
        """
        Define o documento de defaults.

        `source` pode ser um documento já carregado (mapping), um caminho
        de arquivo (str ou Path) ou um stream aberto. `None` não altera
        os defaults atuais.
        """
        if source is None:
            return self
        if isinstance(source, Mapping):
            self._defaults = deepcopy(dict(source))
        elif isinstance(source, (str, Path)):
            self._defaults = read_document(source, self.settings)
        else:
            self._defaults = parse_document(source, source=getattr(source, "name", None))
        logger.debug("Defaults carregados para %s", self.target.__qualname__)
        return self

    def load_defaults_text(self, text: str) -> "ConfigMapper[T]":
        self._defaults = parse_document(text, source="<text>")
        return self

    def load_resource(self, package: str, name: str) -> "ConfigMapper[T]":
        self._defaults = read_resource(package, name, self.settings)
        return self

    def with_codec(self, codec: ConfigCodec[Any]) -> "ConfigMapper[T]":
        self.codecs.register(codec)
        return self

    def build(self) -> T:
        """
        Lê o arquivo, aplica os defaults e materializa a instância.

        Raises:
            ConfigIOError: Se nenhum arquivo foi associado ou se a leitura falhar.
            ConfigParseError: Se o arquivo for YAML inválido.
            ConstructionError, EnumMappingError, ValueCoercionError,
            UnsupportedContainerError:
                propagadas do materializer.
        """
        path = self._require_path()
        current = read_document(path, self.settings)
        merge_defaults(self._defaults, current, changeable_paths(self.target))
        self._document = current
        return Materializer(self.codecs).materialize(self.target, current)

    def document(self) -> Dict[str, Any]:
        """Documento merged do último `build()`."""
        return self._document

    def dumps(self, instance: T) -> str:
        return Serializer(self.codecs, self.settings).serialize(instance)

    def save(self, instance: T) -> None:
        """Serializa `instance` e substitui o conteúdo do arquivo."""
        path = self._require_path()
        write_text(path, self.dumps(instance), self.settings)
        logger.debug("Configuração salva em %s", path)

    def _require_path(self) -> Path:
        if self._path is None:
            raise ConfigIOError(
                f"Nenhum arquivo associado ao mapper de {self.target.__qualname__}; "
                "chame .file() antes"
            )
        return self._path
