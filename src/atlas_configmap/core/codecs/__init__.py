# src/atlas_configmap/core/codecs/__init__.py
"""Codecs de tipos customizados e seu registro ordenado."""

from .codec import ConfigCodec
from .registry import CodecRegistry

__all__ = ["CodecRegistry", "ConfigCodec"]
