"""
Компонент для токенизации испанского текста.

Отвечает за удаление знаков препинания и символов и разбивку
текста на слова по пробельным символам.
"""

import unicodedata
from typing import List
from ..interfaces.word_processor import TokenProcessorInterface


class TokenProcessor(TokenProcessorInterface):
    """Процессор для токенизации испанского текста."""

    def __init__(self, min_length: int = 1, lowercase: bool = False):
        """
        Инициализирует процессор токенизации.

        Args:
            min_length: Минимальная длина токена
            lowercase: Приводить ли токены к нижнему регистру
        """
        self.min_length = max(1, min_length)
        self.lowercase = lowercase

    def strip_symbols(self, text: str) -> str:
        """
        Удаляет знаки препинания (категории P*) и символы (S*).

        Args:
            text: Исходный текст

        Returns:
            Текст без знаков препинания
        """
        return ''.join(
            ch for ch in text
            if unicodedata.category(ch)[0] not in ('P', 'S')
        )

    def tokenize(self, text: str) -> List[str]:
        """
        Разбивает текст на токены.

        Args:
            text: Исходный текст

        Returns:
            Список токенов (без пробелов по краям)
        """
        if not text or not text.strip():
            return []
        # Единая Unicode-нормализация (NFC): «á» из двух кодовых точек становится одной
        text = unicodedata.normalize('NFC', text)

        tokens = self.strip_symbols(text).split()

        return self.filter_tokens(tokens)

    def filter_tokens(self, tokens: List[str]) -> List[str]:
        """
        Фильтрует токены по минимальной длине.

        Args:
            tokens: Список токенов для фильтрации

        Returns:
            Отфильтрованный список токенов
        """
        filtered = []
        for token in tokens:
            token = token.strip()
            if len(token) < self.min_length:
                continue
            filtered.append(token.lower() if self.lowercase else token)

        return filtered
