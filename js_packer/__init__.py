# js_packer/__init__.py
"""
JsPacker package initializer.
Defines package version and exposes the plugin factory and CLI.
"""
__version__ = "0.1.0"

from js_packer.engine import Engine, packer
from .cli import cli
