"""Integrations with other logging systems."""

from .stdlib import WoofHandler, install, to_woof_level, uninstall

__all__ = ["WoofHandler", "install", "to_woof_level", "uninstall"]
