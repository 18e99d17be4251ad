"""
Абстрактные интерфейсы и модели данных для анализа испанских слов.

Определяет контракты, которые должны реализовывать компоненты,
и неизменяемый результат анализа одного слова.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union


class WordType(str, Enum):
    """Классификация слова по месту ударения."""
    MONOSILABA = 'monosílaba'
    OXITONA = 'oxítona'
    PAROXITONA = 'paroxítona'
    PROPAROXITONA = 'proparoxítona'
    SUPERPROPAROXITONA = 'superproparoxítona'


@dataclass(frozen=True)
class WordAnalysis:
    """Результат анализа одного слова."""
    value: str
    syllables: Tuple[str, ...]
    tonic_syllable: Optional[str]
    tonic_syllable_index: int
    vowels: Tuple[str, ...] = field(default_factory=tuple)
    consonants: Tuple[str, ...] = field(default_factory=tuple)
    # None, если тип не удалось определить
    type: Optional[WordType] = None

    @property
    def syllables_count(self) -> int:
        return len(self.syllables)

    def to_dict(self) -> Dict[str, Any]:
        """Словарь в формате записи анализатора (ключи camelCase)."""
        return {
            'word': self.value,
            'syllables': list(self.syllables),
            'tonicSyllable': self.tonic_syllable,
            'tonicSyllableIndex': self.tonic_syllable_index,
            'vowels': list(self.vowels),
            'consonants': list(self.consonants),
            'type': self.type.value if self.type else None,
        }


class TokenProcessorInterface(ABC):
    """Интерфейс для токенизации текста."""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """Разбивает текст на токены."""
        pass

    @abstractmethod
    def strip_symbols(self, text: str) -> str:
        """Удаляет знаки препинания и символы."""
        pass


class WordAnalyzerInterface(ABC):
    """Интерфейс для анализа слов."""

    @abstractmethod
    def analyze_word(self, word: str) -> WordAnalysis:
        """Анализирует одно слово."""
        pass

    @abstractmethod
    def analyse_word_list(self, words: Iterable[str]) -> List[WordAnalysis]:
        """Анализирует список слов с сохранением порядка."""
        pass

    @abstractmethod
    def analyse_text(self, text: str) -> List[WordAnalysis]:
        """Анализирует все слова текста."""
        pass


class ResultExporterInterface(ABC):
    """Интерфейс для экспорта результатов."""

    @abstractmethod
    def export_to_excel(self, analyses: List[WordAnalysis], filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует результат в Excel формат."""
        pass

    @abstractmethod
    def export_to_csv(self, analyses: List[WordAnalysis], filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует результат в CSV формат."""
        pass

    @abstractmethod
    def export_to_json(self, analyses: List[WordAnalysis], filepath: Union[str, Path]) -> Optional[Path]:
        """Экспортирует результат в JSON формат."""
        pass
