# src/atlas_configmap/core/document/loader.py
"""
Leitura e escrita canônica de documentos YAML de configuração.

Este módulo concentra todo o acesso a disco e ao parser YAML do
Atlas ConfigMap. Os demais módulos operam apenas sobre documentos já
carregados (`dict`).

Responsabilidades do módulo:
    - Interpretar texto ou streams YAML como documento (`dict`)
    - Ler documentos a partir de arquivos e de recursos empacotados
    - Garantir a existência do arquivo de configuração (e diretórios pais)
    - Escrever o texto serializado de volta ao arquivo

Princípios fundamentais:
    - Arquivos são abertos, usados e fechados dentro da mesma operação
    - Nenhum handle permanece aberto entre chamadas
    - Erros de I/O e de parse são fatais e tipados

Invariantes:
    - O retorno de qualquer leitura é sempre um dicionário
    - Documento vazio é interpretado como `{}`
    - Conteúdo raiz que não é mapeamento é rejeitado

Limites explícitos:
    - Não realiza merge de configuração
    - Não conhece o schema do tipo alvo
    - Não mantém cache de documentos lidos
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import IO, Any, Dict, Optional, Union

import yaml  # PyYAML

from ..errors import ConfigIOError, ConfigParseError, InvalidConfigRootTypeError
from ..settings import DEFAULT_SETTINGS, MapperSettings

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def parse_document(
    content: Union[str, bytes, IO[Any]],
    *,
    source: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Interpreta um texto (ou stream) YAML como documento de configuração.

    Decisões arquiteturais:
        - O parse utiliza exclusivamente `yaml.safe_load`
        - Documento vazio (None) é tratado como dicionário vazio
        - O conteúdo raiz deve ser um mapeamento

    Args:
        content: Texto YAML, bytes ou stream aberto.
        source: Nome da origem, usado apenas em mensagens de erro.

    Returns:
        Dict[str, Any]: Documento carregado.

    Raises:
        ConfigParseError: Se o YAML for malformado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    origin = source or "<stream>"
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"YAML inválido em {origin}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__} ({origin})"
        )

    return data


def read_document(path: PathLike, settings: MapperSettings = DEFAULT_SETTINGS) -> Dict[str, Any]:
    """
    Lê e interpreta um arquivo YAML.

    O arquivo é lido a cada chamada; edições externas são observadas
    na próxima leitura.

    Raises:
        ConfigIOError: Se o arquivo não puder ser lido.
        ConfigParseError: Se o conteúdo for YAML inválido ou não estiver
            no encoding configurado.
    """
    p = Path(path)
    try:
        with p.open("r", encoding=settings.encoding) as f:
            return parse_document(f, source=str(p))
    except OSError as e:
        raise ConfigIOError(f"Falha ao ler arquivo de configuração: {p}") from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Arquivo não está em {settings.encoding}: {p}") from e


def read_resource(
    package: str,
    name: str,
    settings: MapperSettings = DEFAULT_SETTINGS,
) -> Dict[str, Any]:
    """
    Lê um arquivo de defaults empacotado junto ao código.

    Args:
        package: Pacote Python que contém o recurso (ex.: "myapp.defaults").
        name: Nome do arquivo dentro do pacote (ex.: "config.yml").

    Raises:
        ConfigIOError: Se o recurso não existir ou não puder ser lido.
        ConfigParseError: Se o conteúdo for YAML inválido ou não estiver
            no encoding configurado.
    """
    try:
        text = resources.files(package).joinpath(name).read_text(encoding=settings.encoding)
    except (OSError, ModuleNotFoundError) as e:
        raise ConfigIOError(f"Recurso de defaults não encontrado: {package}/{name}") from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(
            f"Recurso não está em {settings.encoding}: {package}/{name}"
        ) from e
    return parse_document(text, source=f"{package}/{name}")


def ensure_file(path: PathLike) -> Path:
    """
    Garante a existência do arquivo de configuração.

    Diretórios pais são criados quando ausentes; o arquivo é criado vazio.
    Um arquivo existente nunca é truncado.

    Raises:
        ConfigIOError: Se o arquivo ou diretórios não puderem ser criados.
    """
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        if not p.exists():
            p.touch()
            logger.debug("Arquivo de configuração criado: %s", p)
    except OSError as e:
        raise ConfigIOError(f"Falha ao criar arquivo de configuração: {p}") from e
    return p


def write_text(path: PathLike, text: str, settings: MapperSettings = DEFAULT_SETTINGS) -> None:
    """
    Escreve o texto serializado no arquivo, substituindo o conteúdo anterior.

    Raises:
        ConfigIOError: Se o arquivo não puder ser escrito.
    """
    p = Path(path)
    try:
        with p.open("w", encoding=settings.encoding) as f:
            f.write(text)
    except OSError as e:
        raise ConfigIOError(f"Falha ao escrever arquivo de configuração: {p}") from e
