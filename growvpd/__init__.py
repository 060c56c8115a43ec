"""
growvpd package.

Vapor Pressure Deficit math and stage-aware target ranges for grow rooms.
The `growvpd.control` modules are pure; configuration and the CLI live
beside them.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
