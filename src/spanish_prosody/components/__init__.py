"""
Компоненты для анализа испанских слов.

Каждый компонент отвечает за одну конкретную задачу:
- alphabet - классификация букв
- vowel_merger - объединение гласных в дифтонги и трифтонги
- syllabifier - деление на слоги
- stress - ударный слог и тип слова
- TokenProcessor - токенизация текста
- ResultExporter - экспорт результатов
"""

from .alphabet import is_vowel, is_consonant, is_consonant_cluster, has_vowels, has_consonants
from .vowel_merger import merge_vowel_clusters
from .syllabifier import assemble_syllables, split_syllables
from .stress import locate_tonic_index, classify_word
from .tokenizer import TokenProcessor
from .exporter import ResultExporter

__all__ = [
    'is_vowel',
    'is_consonant',
    'is_consonant_cluster',
    'has_vowels',
    'has_consonants',
    'merge_vowel_clusters',
    'assemble_syllables',
    'split_syllables',
    'locate_tonic_index',
    'classify_word',
    'TokenProcessor',
    'ResultExporter',
]
