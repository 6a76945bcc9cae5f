# src/atlas_configmap/core/document/node.py
"""
ConfigNode: visão ordenada de um mapeamento do documento.

Um `ConfigNode` é o objeto entregue aos codecs (decode/encode) e usado
pela fachada dinâmica (`DynamicConfig`). Ele encapsula um mapeamento
chave → valor preservando a ordem de inserção e expõe getters tipados.

Decisões arquiteturais:
    - O node mantém sua própria cópia rasa do mapeamento recebido
    - Getters tipados falham com `TypeError` quando o tipo armazenado difere
    - Chave ausente retorna o `default` informado (None por padrão)

Limites explícitos:
    - Não converte tipos (não é o materializer)
    - Não resolve caminhos pontilhados
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional, Type


_MISSING = object()


class ConfigNode:
    """Mapeamento ordenado de chaves de configuração com acesso tipado."""

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(values) if values else {}

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def get(self, key: str, expected_type: Optional[Type] = None, default: Any = None) -> Any:
        value = self._values.get(key, _MISSING)
        if value is _MISSING or value is None:
            return default
        if expected_type is not None and not _matches(value, expected_type):
            raise TypeError(
                f"Chave '{key}' contém {type(value).__name__}, "
                f"esperado {expected_type.__name__}"
            )
        return value

    def get_str(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.get(key, str, default)

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        return self.get(key, int, default)

    def get_float(self, key: str, default: Optional[float] = None) -> Optional[float]:
        value = self.get(key, float, default)
        return float(value) if isinstance(value, int) else value

    def get_bool(self, key: str, default: Optional[bool] = None) -> Optional[bool]:
        return self.get(key, bool, default)

    def get_list(self, key: str, default: Optional[List[Any]] = None) -> Optional[List[Any]]:
        return self.get(key, list, default)

    def get_map(self, key: str, default: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        return self.get(key, dict, default)

    def get_node(self, key: str) -> "ConfigNode":
        """Retorna o sub-mapeamento em `key` como node (vazio se ausente)."""
        return ConfigNode(self.get_map(key) or {})

    def keys(self) -> List[str]:
        return list(self._values)

    def as_dict(self) -> Dict[str, Any]:
        return self._values

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConfigNode):
            return self._values == other._values
        return NotImplemented

    def __repr__(self) -> str:
        return f"ConfigNode({self._values!r})"


def _matches(value: Any, expected_type: Type) -> bool:
    # bool é subclasse de int; YAML `true` não deve passar por get_int.
    if expected_type is int and isinstance(value, bool):
        return False
    if expected_type is float and isinstance(value, int) and not isinstance(value, bool):
        return True
    return isinstance(value, expected_type)
