#!/usr/bin/env python3
"""
Точка входа для запуска краулера bfs_crawler через командную строку.

Команды:
  crawl     Запустить обход и вывести/сохранить отчёты
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --limit INT         Макс. число страниц (override max_pages)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда crawl опции:
  --seed URL          Стартовый URL (override seed_url)
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --crawl-timeout SEC Таймаут всего обхода (секунд)

Дополнительно:
  --version, -v       Показать версию

Пример:
  bfs-crawler --limit 50 crawl --seed https://example.com --json report.json
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from bfs_crawler import __version__
from bfs_crawler.config import load_config
from bfs_crawler.engine import start_crawl
from bfs_crawler.logger import init_logging
from bfs_crawler.report.html_report import render_html
from bfs_crawler.report.json_report import render_json
from bfs_crawler.sink import SinkError

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='bfs-crawler, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--limit', '-l', 'limit',
    type=click.IntRange(min=1),
    default=None,
    help='Макс. число страниц (override max_pages)'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(name)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, limit, log_level, log_file, log_format):
    """Группа команд bfs-crawler."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path
    ctx.obj['overrides'] = {'max_pages': limit}


def _load(ctx, **overrides):
    try:
        return load_config(ctx.obj['config_path'], **ctx.obj['overrides'], **overrides)
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.option('--seed', '-s', 'seed', default=None, help='Стартовый URL (override seed_url)')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами (по умолчанию встроенная)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Таймаут всего обхода (секунд)'
)
@click.pass_context
def crawl(ctx, seed, json_output, html_output, template_dir, pretty, crawl_timeout):
    """Запустить обход и сгенерировать отчёты."""
    cfg = _load(ctx, seed_url=seed)
    click.echo(f'Starting crawl from: {cfg.seed_url}', err=True)
    try:
        if crawl_timeout:
            report = asyncio.run(
                asyncio.wait_for(start_crawl(cfg), timeout=crawl_timeout)
            )
        else:
            report = asyncio.run(start_crawl(cfg))
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {crawl_timeout} секунд')
    except SinkError as e:
        print_error(f'Ошибка хранилища: {e}')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    # Если не сохраняем в файл - печатаем в stdout
    if not json_output and not html_output:
        click.echo(report.json(pretty=pretty))
        return

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, html_output, template_dir)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.option('--seed', '-s', 'seed', default=None, help='Стартовый URL (override seed_url)')
@click.pass_context
def show_config(ctx, seed):
    """Показать текущую конфигурацию в JSON."""
    cfg = _load(ctx, seed_url=seed)
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
