# src/atlas_configmap/core/mapping/coercion.py
"""
Coerção de valores brutos do documento para tipos escalares.

Política de coerção (v1):
    - valor já do tipo alvo → identidade
    - int ← float → truncamento; float ← int → alargamento
    - int/float ← texto numérico → parse
    - bool ← texto → "true" (sem distinção de caixa) é True, qualquer outro é False
    - bool ← número → `bool(n)`
    - str ← qualquer valor → `str(valor)`
    - Enum ← texto → busca pelo nome exato da constante

Texto não numérico para int/float, ou mapeamentos e sequências para
int/float/bool, falham com `ValueCoercionError`; o valor bruto nunca é
atribuído ao campo.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Type

from ..errors import EnumMappingError, ValueCoercionError
from ..schema.types import is_enum_type

_STRUCTURED = (dict, list, tuple, set, frozenset)


def coerce(raw: Any, target: Type[Any]) -> Any:
    """
    Converte `raw` para o tipo escalar `target`.

    Raises:
        EnumMappingError: Se `target` for um Enum e o texto não
            corresponder a nenhuma constante.
        ValueCoercionError: Se o valor não puder ser convertido para `target`.
    """
    if raw is None:
        return None

    if is_enum_type(target):
        return _coerce_enum(raw, target)

    if target is bool:
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, (int, float)):
            return bool(raw)
        if isinstance(raw, _STRUCTURED):
            raise _mismatch(raw, target)
        return str(raw).strip().lower() == "true"

    if target is str:
        return raw if isinstance(raw, str) else str(raw)

    if target is int:
        if isinstance(raw, bool):
            return int(raw)
        if isinstance(raw, int):
            return raw
        if isinstance(raw, float):
            return int(raw)
        if isinstance(raw, str):
            return _parse_number(raw, int)
        raise _mismatch(raw, target)

    if target is float:
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return float(raw)
        if isinstance(raw, str):
            return _parse_number(raw, float)
        raise _mismatch(raw, target)

    return raw


def _coerce_enum(raw: Any, target: Type[Enum]) -> Enum:
    if isinstance(raw, target):
        return raw
    name = raw if isinstance(raw, str) else str(raw)
    try:
        return target[name]
    except KeyError:
        allowed = ", ".join(target.__members__)
        raise EnumMappingError(
            f"Valor '{name}' não corresponde a nenhuma constante de "
            f"{target.__qualname__} ({allowed})"
        ) from None


def _parse_number(text: str, target: Type[Any]) -> Any:
    try:
        return target(text.strip())
    except ValueError as e:
        raise ValueCoercionError(
            f"Texto '{text}' não é um {target.__name__} válido"
        ) from e


def _mismatch(raw: Any, target: Type[Any]) -> ValueCoercionError:
    return ValueCoercionError(
        f"Valor do tipo {type(raw).__name__} não pode ser convertido para {target.__name__}"
    )
