# src/atlas_configmap/core/dynamic.py
"""
DynamicConfig: acesso ad hoc ao documento completo.

Tipos raiz que herdam de `DynamicConfig` recebem, além dos campos
tipados, o documento merged inteiro. Isso permite consultas por chave
sem schema estático sobre um documento de resto totalmente tipado:

    class Messages(DynamicConfig):
        prefix: str = "[app]"

    messages = ConfigMapper.of(Messages).file(path).build()
    messages.get_str("errors.not_found")

O node é atribuído apenas na raiz; antes do primeiro build ele é vazio.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

from .document.node import ConfigNode


class DynamicConfig:
    """Base de raízes de configuração com acesso dinâmico por chave."""

    _node: ConfigNode

    def __init__(self) -> None:
        self._node = ConfigNode()

    @property
    def node(self) -> ConfigNode:
        return getattr(self, "_node", None) or ConfigNode()

    def attach_node(self, node: ConfigNode) -> None:
        self._node = node

    def get(self, key: str, expected_type: Optional[Type] = None, default: Any = None) -> Any:
        """
        Busca `key` no documento.

        A chave exata tem prioridade; caso ausente, `key` é interpretada
        como caminho pontilhado ("server.host").
        """
        node = self.node
        if key in node:
            return node.get(key, expected_type, default)

        current: Any = node.as_dict()
        parts = key.split(".")
        for part in parts[:-1]:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        if not isinstance(current, dict):
            return default
        return ConfigNode(current).get(parts[-1], expected_type, default)

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

    def get_node(self, key: str) -> ConfigNode:
        return ConfigNode(self.get_map(key) or {})
