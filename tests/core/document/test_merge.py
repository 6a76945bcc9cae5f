# tests/core/document/test_merge.py
"""
Testes da política de merge de defaults no documento atual.

Este módulo valida o comportamento da função `merge_defaults`, responsável
por completar o arquivo do usuário com os defaults da aplicação.

Os testes asseguram que:
- chaves ausentes são preenchidas em qualquer profundidade
- valores do usuário nunca são sobrescritos
- listas vazias adotam os defaults; listas não vazias são atômicas
- caminhos changeable nunca são preenchidos nem podados
- os defaults nunca são mutados nem compartilhados por referência

Invariantes:
    - Nenhuma chave do documento atual é removida
    - O merge é in-place sobre o documento atual

Limites explícitos:
    - Não valida leitura de arquivos YAML
    - Não valida a descoberta de caminhos changeable (ver tests/core/schema)
"""

import copy

import pytest

try:
    from atlas_configmap.core.document.merge import dotted, merge_defaults
except Exception as e:  # noqa: BLE001
    merge_defaults = None
    dotted = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o módulo de merge esteja disponível para os testes.

    Falha explicitamente com uma mensagem orientada quando `merge_defaults`
    não pode ser importado.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing merge module. Implement:\n"
            "- src/atlas_configmap/core/document/merge.py (merge_defaults)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_scenario_fills_missing_and_preserves_user_values():
    """
    Verifica o cenário canônico de upgrade: defaults novos, arquivo antigo.

    - `retries` não existe no usuário → preenchido pelo default
    - `server.host` existe no usuário → preservado
    - `server.tags` ausente no usuário → preenchido com a lista default (vazia)
    """
    _require_imports()
    defaults = {"retries": 3, "server": {"host": "a", "tags": []}}
    current = {"server": {"host": "b"}}

    merge_defaults(defaults, current, frozenset())

    assert current == {"server": {"host": "b", "tags": []}, "retries": 3}


def test_merge_fills_keys_at_every_depth():
    """
    Verifica que chaves ausentes são preenchidas em qualquer nível de aninhamento.

    Invariantes:
        - O valor preenchido é igual ao default
        - Valores do usuário em níveis intermediários são preservados
    """
    _require_imports()
    defaults = {"a": {"b": {"c": 1, "d": 2}, "e": 3}}
    current = {"a": {"b": {"c": 10}}}

    merge_defaults(defaults, current)

    assert current == {"a": {"b": {"c": 10, "d": 2}, "e": 3}}


def test_merge_never_overwrites_scalars():
    _require_imports()
    defaults = {"level": "LOW", "port": 80, "debug": False}
    current = {"level": "HIGH", "port": 8080, "debug": True}

    merge_defaults(defaults, current)

    assert current == {"level": "HIGH", "port": 8080, "debug": True}


def test_merge_keeps_user_value_on_shape_conflict():
    """
    Verifica que um valor do usuário com formato diferente do default é preservado.

    Decisões arquiteturais:
        - O merge não converte tipos
        - O merge não trata conflito de formato como erro
    """
    _require_imports()
    defaults = {"server": {"host": "a"}, "tags": ["x"]}
    current = {"server": "disabled", "tags": "none"}

    merge_defaults(defaults, current)

    assert current == {"server": "disabled", "tags": "none"}


def test_merge_empty_list_adopts_defaults():
    """
    Verifica que uma lista vazia no usuário adota integralmente a lista default.
    """
    _require_imports()
    defaults = {"plugins": ["core", "extra"]}
    current = {"plugins": []}

    merge_defaults(defaults, current)

    assert current == {"plugins": ["core", "extra"]}
    assert current["plugins"] is not defaults["plugins"]


def test_merge_non_empty_list_is_atomic():
    """
    Verifica que listas não vazias não são mescladas elemento a elemento.
    """
    _require_imports()
    defaults = {"plugins": ["core", "extra"], "windows": [{"width": 800, "height": 600}]}
    current = {"plugins": ["mine"], "windows": [{"width": 1024}]}

    merge_defaults(defaults, current)

    assert current == {"plugins": ["mine"], "windows": [{"width": 1024}]}


def test_merge_changeable_path_is_isolated():
    """
    Verifica que subárvores changeable não recebem entradas dos defaults.

    Cenário: tabela de usuários nomeados. O default traz `admin`, mas o
    usuário removeu `admin` e criou `bob`; `admin` não pode reaparecer.
    """
    _require_imports()
    defaults = {"users": {"admin": {"role": "owner"}}}
    current = {"users": {"bob": {"role": "guest"}}}

    merge_defaults(defaults, current, frozenset({"users"}))

    assert current == {"users": {"bob": {"role": "guest"}}}


def test_merge_changeable_path_absent_is_copied_whole():
    """
    Verifica que uma subárvore changeable ausente no usuário é copiada do default.

    O isolamento vale para subárvores existentes; uma chave inexistente
    continua sendo preenchida como qualquer outra.
    """
    _require_imports()
    defaults = {"users": {"admin": {"role": "owner"}}}
    current = {}

    merge_defaults(defaults, current, frozenset({"users"}))

    assert current == {"users": {"admin": {"role": "owner"}}}


def test_merge_changeable_list_is_not_filled():
    _require_imports()
    defaults = {"motd": ["welcome"]}
    current = {"motd": []}

    merge_defaults(defaults, current, frozenset({"motd"}))

    assert current == {"motd": []}


def test_merge_path_match_is_exact():
    """
    Verifica que caminhos são comparados por igualdade exata.

    `server` changeable não protege `server_extra`, nem `server` protege
    níveis acima dele.
    """
    _require_imports()
    defaults = {"server": {"a": 1}, "server_extra": {"b": 2}, "outer": {"server": {"c": 3}}}
    current = {"server": {}, "server_extra": {}, "outer": {"server": {}}}

    merge_defaults(defaults, current, frozenset({"server"}))

    assert current == {"server": {}, "server_extra": {"b": 2}, "outer": {"server": {"c": 3}}}


def test_merge_does_not_mutate_or_share_defaults():
    """
    Verifica que os defaults não são mutados nem compartilhados por referência.

    Invariantes:
        - `defaults` permanece idêntico após o merge
        - Mutar o documento atual não altera os defaults
    """
    _require_imports()
    defaults = {"server": {"tags": ["a"]}, "limits": {"cpu": 1}}
    snapshot = copy.deepcopy(defaults)
    current = {}

    merge_defaults(defaults, current)
    current["server"]["tags"].append("b")
    current["limits"]["cpu"] = 99

    assert defaults == snapshot


def test_merge_is_idempotent():
    _require_imports()
    defaults = {"a": {"b": 1}, "c": [1, 2]}
    current = {"a": {}}

    merge_defaults(defaults, current)
    once = copy.deepcopy(current)
    merge_defaults(defaults, current)

    assert current == once


def test_dotted_joins_paths():
    _require_imports()
    assert dotted("", "users") == "users"
    assert dotted("server", "tags") == "server.tags"
