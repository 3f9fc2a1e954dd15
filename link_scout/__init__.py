# link_scout/__init__.py
"""
Пакет LinkScout.
Здесь задаётся версия; CLI находится в :mod:`link_scout.cli`.
"""
__version__ = "0.1.0"
