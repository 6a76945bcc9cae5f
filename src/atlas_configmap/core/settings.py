# src/atlas_configmap/core/settings.py
"""
Parâmetros de leitura e escrita de arquivos YAML.

`MapperSettings` agrupa as opções de encoding e formatação usadas pelo
loader e pelo serializer. É imutável e pode ser compartilhado entre
mappers.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MapperSettings:
    """
    Opções de I/O e formatação YAML.

    Campos:
    - encoding: encoding dos arquivos lidos e escritos
    - indent: indentação de blocos aninhados no YAML emitido
    - width: largura máxima de linha antes de o emitter quebrar escalares
    - allow_unicode: emite caracteres não-ASCII sem escape
    - comment_prefix: prefixo de cada linha de comentário de campo
    """

    encoding: str = "utf-8"
    indent: int = 2
    width: int = 4096
    allow_unicode: bool = True
    comment_prefix: str = "# "

    def dump_options(self) -> dict:
        return {
            "default_flow_style": False,
            "sort_keys": False,
            "indent": self.indent,
            "width": self.width,
            "allow_unicode": self.allow_unicode,
        }


DEFAULT_SETTINGS = MapperSettings()
