"""
Cliente de linha de comando da API OVH
======================================

Executa uma unica chamada assinada e imprime status e corpo da resposta.

Uso:
    python -m ovh_api.main time                          # Delta local/servidor
    python -m ovh_api.main get /me                       # GET autenticado
    python -m ovh_api.main get-noauth /auth/time         # GET sem assinatura
    python -m ovh_api.main delete /me/api/credential/1   # DELETE autenticado
    python -m ovh_api.main post /me/contact --data '{"firstName": "X"}'
    python -m ovh_api.main --env get /me                 # Credenciais via OVH_*
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from ovh_api.cli.commands import BODIED_COMMANDS, COMMANDS, criar_cliente, executar_comando
from ovh_api.core.constants import EXIT_CONFIG_ERROR, EXIT_TRANSPORT_ERROR
from ovh_api.core.exceptions import ConfigurationError, TransportError
from ovh_api.core.logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ovh-api",
        description="Chamadas assinadas para a API OVH",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--config', type=str, metavar='PATH',
                        help='Arquivo ovh.conf (padrao: ./ovh.conf, ~/.ovh.conf, /etc/ovh.conf)')
    source.add_argument('--env', action='store_true',
                        help='Ler credenciais das variaveis OVH_*')
    parser.add_argument('--env-file', type=str, metavar='PATH', default=None,
                        help='Arquivo dotenv carregado com --env')
    parser.add_argument('--timeout', type=float, default=None,
                        help='Timeout em segundos (padrao: sem timeout)')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        help='Nivel de log (DEBUG, INFO, WARNING, ...)')
    parser.add_argument('--log-dir', type=str, default=None,
                        help='Diretorio para arquivos de log')
    parser.add_argument('command', choices=COMMANDS)
    parser.add_argument('path', nargs='?', default=None,
                        help='Caminho da API, ex: /me')
    parser.add_argument('--data', type=str, default=None,
                        help='Corpo JSON para post/put')
    return parser


def main(argv: list[str] | None = None) -> int:
    """Ponto de entrada da CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command != 'time' and args.path is None:
        parser.error(f"command {args.command!r} requires a path")

    data = None
    if args.command in BODIED_COMMANDS:
        if args.data is None:
            parser.error(f"command {args.command!r} requires --data")
        try:
            data = json.loads(args.data)
        except json.JSONDecodeError as exc:
            parser.error(f"--data is not valid JSON: {exc}")

    logger = setup_logging(level=args.log_level, log_dir=args.log_dir)

    try:
        client = criar_cliente(
            config_path=args.config,
            use_env=args.env,
            env_file=args.env_file,
            timeout=args.timeout,
        )
        return asyncio.run(executar_comando(client, args.command, args.path, data))
    except ConfigurationError as exc:
        logger.error("[ERRO] Configuracao invalida: %s", exc)
        return EXIT_CONFIG_ERROR
    except TransportError as exc:
        logger.error("[ERRO] Falha de comunicacao: %s", exc)
        return EXIT_TRANSPORT_ERROR


if __name__ == "__main__":
    sys.exit(main())
