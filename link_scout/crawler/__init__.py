# link_scout/crawler/__init__.py
"""Движок обхода: фронтир, извлечение ссылок, нормализация URL и транспорт."""
