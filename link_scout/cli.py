# === FILE: link_scout/cli.py ===
"""
Точка входа для запуска LinkScout через командную строку.

Команды:
  check [URL]  Проверить сайт на битые ссылки и вывести/сохранить отчёт
  config [URL] Показать итоговую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (необязательно)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только консоль, если не указан)
  --log-format FORMAT Формат логирования

Команда check опции:
  --timeout SEC       Таймаут одного запроса
  --concurrency N     Число одновременных запросов
  --user-agent UA     Заголовок User-Agent
  --parser NAME       Поиск ссылок: regex или html
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами
  --pretty            JSON с отступом 2 (без файлов - JSON в stdout)
  --run-timeout SEC   Таймаут всей проверки (секунд)
  --fail-on-broken    Код выхода 1, если найдены битые ссылки

Пример:
  link-scout check example.com --json report.json --pretty
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from link_scout import __version__
from link_scout.config import build_config, read_config_file
from link_scout.engine import Engine
from link_scout.logger import init_logging
from link_scout.report import render_html, render_json, render_text

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _make_config(ctx, url, **overrides):
    data = ctx.obj['config_data']
    try:
        return build_config(data, base_url=url, **overrides)
    except ValidationError as e:
        print_error(f'Ошибка конфигурации: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
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
    help='Путь к файлу логов'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд LinkScout CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    data = {}
    if config_path is not None:
        try:
            data = read_config_file(config_path)
        except (OSError, ValueError, TypeError) as e:
            print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config_data'] = data


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.option('--timeout', type=float, default=None, help='Таймаут одного запроса (секунд)')
@click.option('--concurrency', type=int, default=None, help='Число одновременных запросов')
@click.option('--user-agent', 'user_agent', default=None, help='Заголовок User-Agent')
@click.option(
    '--parser', 'link_parser',
    type=click.Choice(['regex', 'html']),
    default=None,
    help='Способ поиска ссылок'
)
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
    help='Папка с Jinja2-шаблонами (встроенный шаблон, если не указана)'
)
@click.option('--pretty', is_flag=True, help='JSON с отступом 2; без --json/--html печатает JSON вместо текста')
@click.option('--run-timeout', 'run_timeout', type=float, default=None, help='Таймаут всей проверки (секунд)')
@click.option('--fail-on-broken', is_flag=True, help='Код выхода 1 при найденных битых ссылках')
@click.pass_context
def check(ctx, url, timeout, concurrency, user_agent, link_parser, json_output, html_output,
          template_dir, pretty, run_timeout, fail_on_broken):
    """Проверить сайт и сгенерировать отчёт о битых ссылках."""
    cfg = _make_config(
        ctx, url,
        timeout=timeout,
        concurrency=concurrency,
        user_agent=user_agent,
        link_parser=link_parser,
    )
    click.echo(f'Checking links on {cfg.base_url}', err=True)
    try:
        report = Engine(cfg).start_check(run_timeout)
    except asyncio.TimeoutError:
        print_error(f'Проверка не завершена за {run_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при проверке: {e}')

    if not json_output and not html_output:
        click.echo(report.json(pretty=True) if pretty else render_text(report))

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')

    if fail_on_broken and report.broken_links:
        sys.exit(1)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.pass_context
def show_config(ctx, url):
    """Показать итоговую конфигурацию в JSON."""
    cfg = _make_config(ctx, url)
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
