"""Точка входа: проверка адресов из аргументов или stdin."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, Iterable, Sequence, TextIO

from mailaddr.config import get_settings
from mailaddr.modules.address import EmailAddress
from mailaddr.modules.errors import EmailAddressError
from mailaddr.modules.options import Options

LOGGER = logging.getLogger("mailaddr.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate e-mail addresses (RFC 5321/5322/6531).")
    parser.add_argument(
        "addresses",
        nargs="*",
        help="Адреса для проверки; без аргументов читаются строки из stdin",
    )
    parser.add_argument(
        "--min-sub-domains",
        type=int,
        default=None,
        help="Минимальное число меток в домене",
    )
    parser.add_argument(
        "--require-tld",
        action="store_true",
        help="Требовать домен верхнего уровня (не меньше двух меток)",
    )
    parser.add_argument(
        "--no-domain-literal",
        action="store_true",
        help="Запретить домены вида [127.0.0.1]",
    )
    parser.add_argument(
        "--no-display-text",
        action="store_true",
        help="Запретить форму 'Name <addr>'",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Выводить результат построчно в JSON",
    )
    return parser


def options_from_args(args: argparse.Namespace, base: Options) -> Options:
    """Накладывает флаги командной строки на настройки из окружения."""
    options = base
    if args.min_sub_domains is not None:
        if args.min_sub_domains < 0:
            raise ValueError("--min-sub-domains must be non-negative")
        options = options.with_minimum_sub_domains(args.min_sub_domains)
    if args.require_tld and options.minimum_sub_domains < 2:
        options = options.with_required_tld()
    if args.no_domain_literal:
        options = options.without_domain_literal()
    if args.no_display_text:
        options = options.without_display_text()
    return options


def check_address(text: str, options: Options) -> Dict[str, object]:
    """Проверяет один адрес и возвращает структурированный результат."""
    try:
        address = EmailAddress.parse(text, options)
    except EmailAddressError as exc:
        return {
            "input": text,
            "valid": False,
            "error": exc.kind.value,
            "message": exc.kind.message,
        }
    return {
        "input": text,
        "valid": True,
        "local_part": address.local_part,
        "domain": address.domain,
        "display_name": address.display_part,
        "email": address.email,
        "uri": address.to_uri(),
    }


def _iter_inputs(addresses: Sequence[str], stream: TextIO) -> Iterable[str]:
    if addresses:
        yield from addresses
        return
    for line in stream:
        value = line.rstrip("\r\n")
        if value.strip():
            yield value


def _format_text(result: Dict[str, object]) -> str:
    if result["valid"]:
        line = f"OK\t{result['input']}\tlocal={result['local_part']}\tdomain={result['domain']}"
        if result["display_name"]:
            line += f"\tdisplay={result['display_name']}"
        return line
    return f"INVALID\t{result['input']}\t{result['error']}: {result['message']}"


def run(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Выполняет проверку и возвращает код завершения процесса."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    try:
        options = options_from_args(args, settings.options())
    except ValueError as exc:
        parser.error(str(exc))

    out = stdout or sys.stdout
    checked = 0
    invalid = 0
    for text in _iter_inputs(args.addresses, stdin or sys.stdin):
        result = check_address(text, options)
        checked += 1
        if not result["valid"]:
            invalid += 1
        if args.json:
            out.write(json.dumps(result, ensure_ascii=False) + "\n")
        else:
            out.write(_format_text(result) + "\n")

    LOGGER.info("Проверено адресов: %s, некорректных: %s", checked, invalid)
    return 1 if invalid else 0


def main() -> None:
    """Стартует проверку адресов по переданным параметрам."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
        stream=sys.stderr,
    )
    sys.exit(run())


if __name__ == "__main__":
    main()
