"""
Компонент для деления слова на слоги.

Получает фонетические единицы (см. vowel_merger) и распределяет
согласные между слоговыми ядрами по правилам испанской орфографии:
- одиночная согласная между гласными отходит к следующему слогу
- одиночная согласная перед другой согласной или в конце слова
  закрывает предыдущий слог
- неразделимые сочетания (tr, bl, ch ...) целиком отходят к следующей гласной
"""

from typing import List, Sequence
import logging

from .alphabet import has_consonants, has_vowels, is_consonant_cluster
from .vowel_merger import merge_vowel_clusters

logger = logging.getLogger(__name__)

STANDALONE_Y = ('y', 'Y')


def _is_emittable(syllable: str) -> bool:
    """Одиночная согласная слогом не считается, кроме союза «y»."""
    if syllable in STANDALONE_Y:
        return True
    return syllable != '' and not (len(syllable) == 1 and has_consonants(syllable))


def assemble_syllables(units: Sequence[str]) -> List[str]:
    """
    Собирает слоги из фонетических единиц.

    Args:
        units: Фонетические единицы слова в исходном порядке

    Returns:
        Список слогов
    """
    syllables: List[str] = []
    units_len = len(units)
    consonants_count = 0
    j = 0

    while j < units_len:
        tmp_slice = units[j]
        next_slice = units[j + 1] if j + 1 < units_len else ''
        prev_slice = units[j - 1] if j >= 1 else ''

        if has_consonants(tmp_slice):
            consonants_count += 1

        if consonants_count == 1 and has_vowels(next_slice):
            # Согласная открывает следующий слог
            tmp_slice += next_slice
            j += 1
            consonants_count = 0
        elif (
            consonants_count == 1
            and not is_consonant_cluster(tmp_slice + next_slice)
            and (has_consonants(next_slice) or next_slice == '')
        ):
            # Согласная закрывает предыдущий слог
            if syllables:
                syllables[-1] += tmp_slice
                if tmp_slice in STANDALONE_Y:
                    tmp_slice = ''
            consonants_count = 0
        elif (
            consonants_count == 2
            and is_consonant_cluster(prev_slice + tmp_slice)
            and has_vowels(next_slice)
        ):
            tmp_slice = prev_slice + tmp_slice + next_slice
            j += 1
            consonants_count = 0

        if _is_emittable(tmp_slice):
            syllables.append(tmp_slice)

        j += 1

    return syllables


def split_syllables(word: str) -> List[str]:
    """
    Делит слово на слоги.

    Args:
        word: Исходное слово (без пробелов по краям)

    Returns:
        Список слогов; для вырожденного ввода может быть пустым
    """
    syllables = assemble_syllables(merge_vowel_clusters(word))
    logger.debug(f"Слоги '{word}': {syllables}")
    return syllables
