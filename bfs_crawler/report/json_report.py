"""
Генерация JSON-отчёта для проекта bfs_crawler.

Сериализация объекта CrawlReport в файл.
"""
import json
from dataclasses import asdict
from pathlib import Path

from bfs_crawler.aggregator import CrawlReport


def render_json(report: CrawlReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект CrawlReport с данными обхода
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 пробела (по умолчанию) или компактная запись
    :return: Path сохранённого файла

    Пример:
    ```python
    from bfs_crawler.report.json_report import render_json
    report_path = render_json(report, 'reports/report.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(asdict(report), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
