"""
Исключения модуля spanish_prosody
"""


class SpanishProsodyError(Exception):
    """Базовое исключение модуля"""


class InvalidInputError(SpanishProsodyError, ValueError):
    """Слово для анализа не задано (пустая строка)"""
