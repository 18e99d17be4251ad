"""
Компонент для экспорта результатов анализа.

Отвечает за экспорт результатов в различные форматы:
Excel, CSV, JSON с временными метками.
"""

import json
import csv
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union
import pandas as pd
from ..interfaces.word_processor import ResultExporterInterface, WordAnalysis
import logging

logger = logging.getLogger(__name__)

CSV_HEADERS = ['Слово', 'Слоги', 'Ударный слог', 'Индекс ударного слога', 'Тип']


def _to_row(analysis: WordAnalysis) -> Dict[str, Union[str, int]]:
    return {
        'Слово': analysis.value,
        'Слоги': '-'.join(analysis.syllables),
        'Ударный слог': analysis.tonic_syllable or '',
        'Индекс ударного слога': analysis.tonic_syllable_index,
        'Тип': analysis.type.value if analysis.type else '',
    }


class ResultExporter(ResultExporterInterface):
    """Экспортёр результатов анализа."""

    def __init__(self, output_dir: str = "data/results", main_sheet_name: str = "Syllables"):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для сохранения результатов
            main_sheet_name: Название основного листа Excel
        """
        self.output_dir = Path(output_dir)
        self.main_sheet_name = main_sheet_name

    def _prepare_path(self, filepath: Union[str, Path], suffix: str) -> Path:
        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix(suffix)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        return filepath

    def export_to_excel(self, analyses: List[WordAnalysis], filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует результат в Excel формат.

        Args:
            analyses: Результаты анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к файлу или None, если экспортировать нечего
        """
        if not analyses:
            logger.info("Нет данных для экспорта в Excel")
            return None

        filepath = self._prepare_path(filepath, '.xlsx')
        df = pd.DataFrame([_to_row(a) for a in analyses], columns=CSV_HEADERS)

        # Распределение по типам
        type_counts = Counter(a.type.value if a.type else 'unknown' for a in analyses)
        stats_df = pd.DataFrame(
            [{'Тип': word_type, 'Количество': count} for word_type, count in type_counts.most_common()]
        )

        try:
            with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
                df.to_excel(writer, sheet_name=self.main_sheet_name, index=False)
                stats_df.to_excel(writer, sheet_name='Статистика', index=False)
        except (OSError, ValueError) as e:
            logger.error(f"Ошибка экспорта в Excel: {e}")
            raise

        logger.info(f"Результат экспортирован в Excel: {filepath}")
        return filepath

    def export_to_csv(self, analyses: List[WordAnalysis], filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует результат в CSV формат.

        Args:
            analyses: Результаты анализа
            filepath: Путь для сохранения файла
        """
        if not analyses:
            logger.info("Нет данных для экспорта в CSV")
            return None

        filepath = self._prepare_path(filepath, '.csv')
        try:
            with open(filepath, 'w', newline='', encoding='utf-8') as csvfile:
                writer = csv.DictWriter(csvfile, fieldnames=CSV_HEADERS)
                writer.writeheader()
                for analysis in analyses:
                    writer.writerow(_to_row(analysis))
        except OSError as e:
            logger.error(f"Ошибка экспорта в CSV: {e}")
            raise

        logger.info(f"Результат экспортирован в CSV: {filepath}")
        return filepath

    def export_to_json(self, analyses: List[WordAnalysis], filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует результат в JSON формат.

        Args:
            analyses: Результаты анализа
            filepath: Путь для сохранения файла
        """
        if not analyses:
            logger.info("Нет данных для экспорта в JSON")
            return None

        filepath = self._prepare_path(filepath, '.json')
        json_data = {
            'metadata': {
                'timestamp': datetime.now().isoformat(),
                'total_words': len(analyses),
            },
            'words': [analysis.to_dict() for analysis in analyses],
        }

        try:
            with open(filepath, 'w', encoding='utf-8') as jsonfile:
                json.dump(json_data, jsonfile, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error(f"Ошибка экспорта в JSON: {e}")
            raise

        logger.info(f"Результат экспортирован в JSON: {filepath}")
        return filepath

    def export_all_formats(self, analyses: List[WordAnalysis], base_filename: str) -> Dict[str, Path]:
        """
        Экспортирует результат во все доступные форматы.

        Args:
            analyses: Результаты анализа
            base_filename: Базовое имя файла без расширения

        Returns:
            Словарь с путями к экспортированным файлам
        """
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        base_filename = f"{base_filename}_{timestamp}"

        exported_files: Dict[str, Path] = {}
        exporters = {
            'excel': (self.export_to_excel, '.xlsx'),
            'csv': (self.export_to_csv, '.csv'),
            'json': (self.export_to_json, '.json'),
        }
        for name, (export, suffix) in exporters.items():
            path = export(analyses, self.output_dir / f"{base_filename}{suffix}")
            if path is not None:
                exported_files[name] = path

        if exported_files:
            logger.info(f"Результат экспортирован во все форматы в папку: {self.output_dir}")
        return exported_files
