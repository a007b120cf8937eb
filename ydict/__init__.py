"""
ydict - Youdao dictionary and suggestion lookups rendered as annotated text
"""

__version__ = "1.0.0"
__description__ = "Youdao dictionary extraction and rendering for translation tools"

from .core.factory import create_dict_engine, create_suggest_engine

__all__ = ["create_dict_engine", "create_suggest_engine"]
