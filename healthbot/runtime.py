from __future__ import annotations

from dataclasses import dataclass

from healthbot.config import Settings
from healthbot.services.analyzer import NutritionAnalyzer


@dataclass(slots=True)
class AppContext:
    """Зависимости обработчиков; передаются через workflow data диспетчера (ключ ``ctx``)."""

    settings: Settings
    analyzer: NutritionAnalyzer
