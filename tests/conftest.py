# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas ConfigMap.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos YAML de defaults e de usuário semelhantes ao uso real
- um helper para escrever arquivos de configuração em `tmp_path`
- registries de codecs já preparados

Decisões arquiteturais:
    - Documentos são fornecidos como string YAML
    - Todo I/O acontece dentro de `tmp_path`
    - Tipos de configuração vivem em `tests/fixtures/schemas.py`

Invariantes:
    - Nenhuma fixture mantém estado entre testes
    - Todas as fixtures são seguras para execução em paralelo

Limites explícitos:
    - Não substituir testes de integração (`tests/e2e`)
    - Não conter lógica condicional complexa
"""

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def app_defaults_yaml() -> str:
    """
    YAML de defaults embarcado na aplicação (versão nova do software).

    Representa o arquivo que acompanha o código e que deve completar o
    arquivo do usuário sem sobrescrever edições.

    Returns:
        str: Conteúdo YAML dos defaults.
    """
    return """\
retries: 3
level: MEDIUM
http-server:
  host: 0.0.0.0
  port: 8080
  tags:
    - web
    - public
users:
  admin:
    role: owner
    quota: 100
windows:
  - width: 800
    height: 600
"""


@pytest.fixture
def app_user_yaml() -> str:
    """
    YAML do usuário gerado por uma versão anterior e editado manualmente.

    Returns:
        str: Conteúdo YAML do arquivo atual do usuário.
    """
    return """\
level: HIGH
http-server:
  host: example.org
  tags: []
users:
  bob:
    role: guest
"""


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    """
    Factory que escreve um arquivo YAML em `tmp_path` e retorna seu caminho.

    Subdiretórios no nome são criados conforme necessário.
    """

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def point_codecs():
    """Registry contendo apenas o codec de `Point`."""
    from atlas_configmap import CodecRegistry
    from tests.fixtures.schemas import PointCodec

    return CodecRegistry.of([PointCodec()])
