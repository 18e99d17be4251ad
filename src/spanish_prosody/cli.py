#!/usr/bin/env python3
"""
Интерфейс командной строки для Spanish Prosody

Делит слова на слоги, определяет ударный слог и тип слова.
Источники слов: аргументы командной строки, --text или --file (текст/HTML).
"""

import os
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from .config import config
from .components.exporter import ResultExporter
from .exceptions import InvalidInputError
from .interfaces.word_processor import WordAnalysis
from .text_processor import SpanishTextProcessor
from .word_analyzer import WordAnalyzer


EXPORT_FORMATS = ('json', 'csv', 'excel', 'all')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spanish-prosody",
        description="Spanish Prosody - слогоделение и ударение испанских слов",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python -m spanish_prosody.cli casa árbol canción
  python -m spanish_prosody.cli --text "El murciélago vuela de noche."
  python -m spanish_prosody.cli --file page.html --export all
        """
    )
    parser.add_argument('words', nargs='*', help='Слова для анализа')
    parser.add_argument('--text', help='Текст для анализа')
    parser.add_argument('--file', type=Path, help='Текстовый или HTML файл для анализа')
    parser.add_argument(
        '--skip-errors',
        action='store_true',
        help='Пропускать слова, которые не удалось проанализировать'
    )
    parser.add_argument('--workers', type=int, help='Количество потоков для пакетного анализа')
    parser.add_argument('--export', choices=EXPORT_FORMATS, help='Экспортировать результаты')
    parser.add_argument('--output-dir', help='Папка для экспорта (по умолчанию из config)')
    return parser


def format_analysis(analysis: WordAnalysis) -> str:
    """Строка вывода для одного слова."""
    syllables = '-'.join(
        syllable.upper() if index == analysis.tonic_syllable_index else syllable
        for index, syllable in enumerate(analysis.syllables)
    )
    word_type = analysis.type.value if analysis.type else 'unknown'
    return f"{analysis.value:<20} {syllables:<25} {analysis.tonic_syllable or '':<8} {word_type}"


def run_export(analyses: List[WordAnalysis], fmt: str, output_dir: Optional[str]) -> List[Path]:
    exporter = ResultExporter(
        output_dir=output_dir or config.get_results_folder(),
        main_sheet_name=config.get_main_sheet_name(),
    )
    if fmt == 'all':
        return list(exporter.export_all_formats(analyses, config.get_results_filename_prefix()).values())

    base = exporter.output_dir / config.get_results_filename_prefix()
    export = {
        'json': exporter.export_to_json,
        'csv': exporter.export_to_csv,
        'excel': exporter.export_to_excel,
    }[fmt]
    path = export(analyses, base)
    return [path] if path else []


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    if os.environ.get('SPANISH_PROSODY_DEBUG') == '1':
        os.environ['SPANISH_PROSODY_LOGGING__LEVEL'] = 'DEBUG'
        config._apply_env_overrides()
    config._configure_logging_if_needed(force=True)

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.words and args.text is None and args.file is None:
        parser.print_help()
        return 1

    analyzer = WordAnalyzer(
        workers=args.workers,
        on_error='skip' if args.skip_errors else None,
    )

    try:
        analyses = analyzer.analyse_word_list(args.words)
        if args.text is not None:
            analyses += analyzer.analyse_text(args.text)
        if args.file is not None:
            raw = args.file.read_text(encoding='utf-8')
            analyses += analyzer.analyse_text(SpanishTextProcessor().clean_text(raw))
    except InvalidInputError as e:
        print(f"❌ Ошибка анализа: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"❌ Не удалось прочитать файл: {e}", file=sys.stderr)
        return 1

    for analysis in analyses:
        print(format_analysis(analysis))

    stats = analyzer.get_summary_stats(analyses)
    print(f"\n📊 Всего слов: {stats['total_words']}, слогов в среднем: {stats['avg_syllables']}")

    if args.export:
        try:
            paths = run_export(analyses, args.export, args.output_dir)
        except OSError as e:
            print(f"❌ Ошибка экспорта: {e}", file=sys.stderr)
            return 1
        for path in paths:
            print(f"✅ Результаты экспортированы в: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
