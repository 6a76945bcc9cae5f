# tests/core/schema/test_fields.py
"""
Testes do walker de campos do schema (`describe_fields`).

Os testes asseguram que:
- a ordem de declaração é preservada
- campos herdados aparecem após os do tipo mais derivado, com sombreamento
- constantes (`ClassVar`) e o node dinâmico nunca são descritos
- marcadores de `Annotated` são refletidos no descritor
- parâmetros genéricos de containers são extraídos

Limites explícitos:
    - Não valida descoberta de caminhos changeable
    - Não valida materialização
"""

from collections import OrderedDict, deque
from typing import Annotated, List

import pytest

from atlas_configmap import ConfigKey, ConstructionError
from atlas_configmap.core.schema import describe_fields, mapped_fields

from tests.fixtures.schemas import (
    Account,
    AppConfig,
    ContainerZoo,
    DerivedSection,
    Level,
    Messages,
    ServerConfig,
    Window,
)


def _by_name(cls):
    return {f.name: f for f in describe_fields(cls)}


def test_fields_follow_declaration_order():
    names = [f.name for f in describe_fields(AppConfig)]
    assert names == ["retries", "level", "server", "users", "windows", "cache_dir"]


def test_class_var_is_never_described():
    assert "VERSION" not in _by_name(AppConfig)


def test_config_key_renames_document_key():
    server = _by_name(AppConfig)["server"]
    assert server.key == "http-server"
    assert server.type is ServerConfig
    assert _by_name(AppConfig)["retries"].key == "retries"


def test_comments_are_collected():
    retries = _by_name(AppConfig)["retries"]
    assert retries.comments == ("Número de tentativas antes de falhar",)
    assert _by_name(AppConfig)["level"].comments == ()


def test_ignore_is_described_but_not_mapped():
    """
    Verifica que campos ignorados continuam descritos, mas não mapeados.

    Decisões arquiteturais:
        - `describe_fields` reporta `ignored=True`
        - `mapped_fields` filtra o campo
    """
    cache_dir = _by_name(AppConfig)["cache_dir"]
    assert cache_dir.ignored is True
    assert cache_dir.type is str
    assert "cache_dir" not in [f.name for f in mapped_fields(AppConfig)]


def test_changeable_field_marker():
    fields = _by_name(AppConfig)
    assert fields["users"].changeable is True
    assert fields["windows"].changeable is False


def test_container_parameters():
    fields = _by_name(AppConfig)
    assert fields["users"].container is dict
    assert fields["users"].key_type is str
    assert fields["users"].item_type is Account
    assert fields["users"].is_mapping
    assert fields["windows"].container is list
    assert fields["windows"].item_type is Window
    assert not fields["windows"].is_mapping


def test_container_kinds():
    fields = _by_name(ContainerZoo)
    assert fields["frozen"].container is frozenset
    assert fields["pair"].container is tuple
    assert fields["pair"].item_type is int
    assert fields["queue"].container is deque
    assert fields["ordered"].container is OrderedDict
    assert fields["matrix"].item_type == List[int]
    assert fields["by_level"].key_type is Level
    assert fields["raw"].container is list
    assert fields["raw"].item_type is None


def test_scalar_and_zero_values():
    fields = _by_name(AppConfig)
    assert fields["retries"].is_scalar
    assert fields["level"].is_scalar
    assert not fields["server"].is_scalar
    assert fields["retries"].zero_value() == 0
    assert fields["server"].zero_value() is None


def test_inherited_fields_and_shadowing():
    """
    Verifica a ordem de processamento em hierarquias.

    - Campos do tipo mais derivado vêm primeiro
    - `name` redeclarado no derivado sombreia o do ancestral
    """
    fields = describe_fields(DerivedSection)
    assert [f.name for f in fields] == ["name", "weight", "enabled"]
    assert fields[0].owner is DerivedSection
    assert fields[2].owner.__name__ == "BaseSection"


def test_dynamic_node_is_not_a_field():
    assert [f.name for f in describe_fields(Messages)] == ["prefix"]


def test_descriptors_are_cached():
    assert describe_fields(AppConfig) is describe_fields(AppConfig)


def test_unresolvable_annotation_raises_construction_error():
    class Broken:
        value: "DoesNotExist"

    with pytest.raises(ConstructionError):
        describe_fields(Broken)


def test_annotated_inside_optional_is_unwrapped():
    from typing import Optional

    class Inner:
        port: Optional[Annotated[int, ConfigKey("listen-port")]] = None

    (port,) = describe_fields(Inner)
    assert port.key == "listen-port"
    assert port.type is int
