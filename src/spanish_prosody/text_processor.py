"""
Модуль для подготовки испанского текста к анализу

Содержит функции для:
- Удаления HTML тегов
- Нормализации пробелов
"""

import re
import unicodedata
from bs4 import BeautifulSoup

# Блочные элементы, после которых нужен разрыв строки
BLOCK_TAGS = ['p', 'div', 'br', 'li', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'td', 'th', 'tr']


class SpanishTextProcessor:
    """Класс для обработки испанского текста"""

    def remove_html_tags(self, text: str) -> str:
        """
        Удаляет HTML теги из текста используя BeautifulSoup

        Строчные теги (<b>, <i>, <span>) не разрывают слово:
        mur<b>cié</b>lago остаётся словом murciélago.

        Args:
            text: HTML текст

        Returns:
            Очищенный текст без HTML тегов
        """
        if not text:
            return ""

        if '<' in text and '>' in text:
            soup = BeautifulSoup(text, "html.parser")
            for tag in soup.find_all(BLOCK_TAGS):
                tag.insert_after("\n")
            return soup.get_text()
        return text

    def clean_text(self, text: str) -> str:
        """
        Полная очистка текста: HTML, NFC-нормализация, лишние пробелы

        Args:
            text: Исходный текст

        Returns:
            Очищенный текст
        """
        cleaned_text = self.remove_html_tags(text)
        cleaned_text = unicodedata.normalize('NFC', cleaned_text)
        return re.sub(r'\s+', ' ', cleaned_text).strip()
