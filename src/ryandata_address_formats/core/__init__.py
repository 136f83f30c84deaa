"""Reusable, domain-agnostic building blocks."""

from __future__ import annotations

from ryandata_address_formats.core.factory import PluginFactory

__all__ = ["PluginFactory"]
