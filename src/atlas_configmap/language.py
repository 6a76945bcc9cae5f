# src/atlas_configmap/language.py
"""
LanguageConfig: um schema aplicado a N arquivos por idioma.

Cada idioma possui seu próprio arquivo (`<pasta>/<idioma>/<nome>.yml`) e
seus próprios defaults. A instância materializada é memoizada por idioma,
com inicialização no máximo uma vez por chave mesmo sob chamadas
concorrentes.

    messages = LanguageConfig(
        Messages,
        languages=["en", "pt"],
        folder=data_dir / "lang",
        name="messages",
        defaults="defaults/{language}/messages.yml",
    )
    messages.get("pt").welcome
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, Type, TypeVar, Union

from .core.codecs.codec import ConfigCodec
from .core.settings import MapperSettings
from .mapper import ConfigMapper, DefaultsSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

LANGUAGE_PLACEHOLDER = "{language}"

LanguageDefaults = Union[None, str, Path, Mapping[str, DefaultsSource]]


class LanguageConfig(Generic[T]):
    """Conjunto de configurações do mesmo tipo, uma por idioma."""

    def __init__(
        self,
        target: Type[T],
        languages: Iterable[str],
        folder: Union[str, Path],
        name: str,
        defaults: LanguageDefaults = None,
        *,
        codecs: Iterable[ConfigCodec[Any]] = (),
        settings: Optional[MapperSettings] = None,
    ) -> None:
        self._mappers: Dict[str, ConfigMapper[T]] = {}
        self._instances: Dict[str, T] = {}
        self._locks: Dict[str, threading.Lock] = {}

        codec_list = list(codecs)
        for language in languages:
            mapper = ConfigMapper.of(target, settings).file(Path(folder) / language / f"{name}.yml")
            for codec in codec_list:
                mapper.with_codec(codec)
            mapper.load_defaults(_defaults_for(defaults, language))
            self._mappers[language] = mapper
            self._locks[language] = threading.Lock()

    @property
    def languages(self) -> List[str]:
        return list(self._mappers)

    def mapper(self, language: str) -> ConfigMapper[T]:
        return self._mappers[language]

    def get(self, language: str) -> T:
        """
        Retorna a instância do idioma, materializando-a na primeira chamada.

        Raises:
            KeyError: Se o idioma não foi declarado.
        """
        mapper = self._mappers[language]
        if language in self._instances:
            return self._instances[language]
        with self._locks[language]:
            if language not in self._instances:
                self._instances[language] = mapper.build()
                logger.debug("Configuração de idioma materializada: %s", language)
            return self._instances[language]

    def reload(self, language: str) -> T:
        """Descarta a instância memoizada e lê o arquivo novamente."""
        with self._locks[language]:
            self._instances[language] = self._mappers[language].build()
            return self._instances[language]

    def save(self, language: str) -> None:
        self._mappers[language].save(self.get(language))

    def save_all(self) -> None:
        for language in self._mappers:
            self.save(language)


def _defaults_for(defaults: LanguageDefaults, language: str) -> DefaultsSource:
    if defaults is None:
        return None
    if isinstance(defaults, (str, Path)):
        return Path(str(defaults).replace(LANGUAGE_PLACEHOLDER, language))
    return defaults.get(language)
