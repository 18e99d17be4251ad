"""
Spanish Prosody - модуль для слогоделения и анализа ударения испанских слов

Этот модуль предоставляет инструменты для:
- Деления испанских слов на слоги (с учётом дифтонгов и трифтонгов)
- Определения ударного слога по правилам испанской орфографии
- Классификации слов (monosílaba, oxítona, paroxítona, ...)
- Пакетного анализа списков слов и текстов
- Экспорта результатов в Excel, CSV и JSON
"""

__version__ = "0.1.0"
__author__ = "Sergey"

from .exceptions import InvalidInputError, SpanishProsodyError
from .interfaces.word_processor import WordAnalysis, WordType
from .word_analyzer import WordAnalyzer, analyze_word, analyse_word_list, analyse_text

__all__ = [
    "InvalidInputError",
    "SpanishProsodyError",
    "WordAnalysis",
    "WordType",
    "WordAnalyzer",
    "analyze_word",
    "analyse_word_list",
    "analyse_text",
]
