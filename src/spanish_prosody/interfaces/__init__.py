"""
Интерфейсы и модели данных для анализа испанских слов.

Определяет абстрактные базовые классы для компонентов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .word_processor import (
    WordType,
    WordAnalysis,
    TokenProcessorInterface,
    WordAnalyzerInterface,
    ResultExporterInterface
)

__all__ = [
    'WordType',
    'WordAnalysis',
    'TokenProcessorInterface',
    'WordAnalyzerInterface',
    'ResultExporterInterface'
]
