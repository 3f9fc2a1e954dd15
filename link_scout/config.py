# === FILE: link_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации LinkScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Literal, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from link_scout.crawler.normalizer import prepare_start_url


class CheckerConfig(BaseModel):
    """Конфигурация для одного запуска проверки ссылок."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(..., description="Стартовый URL; без схемы добавляется https://, http:// меняется на https://.")
    timeout: float = Field(15.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("LinkScout/0.1", min_length=1, description="Заголовок User-Agent.")
    concurrency: int = Field(1, ge=1, le=64, description="Число одновременных запросов.")
    broken_statuses: Tuple[int, ...] = Field((404,), description="HTTP-статусы, считающиеся битой ссылкой.")
    link_parser: Literal["regex", "html"] = Field("regex", description="Способ поиска ссылок на странице.")
    progress_interval: float = Field(1.0, ge=0, description="Период вывода прогресса (секунд), 0 - выключено.")

    @field_validator("base_url", mode="before")
    def _prepare_base_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            return prepare_start_url(v)
        return v

    @field_validator("broken_statuses")
    def _check_statuses(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        bad = [code for code in v if not 100 <= code <= 599]
        if bad:
            raise ValueError(f"недопустимые HTTP-статусы: {bad}")
        return tuple(dict.fromkeys(v))


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Читает YAML или JSON и возвращает «сырые» данные без проверки схемы."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def build_config(data: Dict[str, Any] | None = None, **overrides: Any) -> CheckerConfig:
    """
    Собирает CheckerConfig из данных файла и переопределений CLI.
    Переопределения со значением None игнорируются.
    """
    merged = dict(data or {})
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return CheckerConfig(**merged)


def load_config(path: Union[str, Path]) -> CheckerConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CheckerConfig.
    При отсутствии файла бросает FileNotFoundError.
    """
    return build_config(read_config_file(path))


__all__ = ["CheckerConfig", "read_config_file", "build_config", "load_config"]
