"""
Engine Package.

Adapters that run the external MeCab analyser.
"""

from mecabkit.engine.adapter import EngineAdapter, MecabProcessAdapter

__all__ = ["EngineAdapter", "MecabProcessAdapter"]
