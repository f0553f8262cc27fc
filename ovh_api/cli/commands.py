"""Comandos CLI para chamadas a API OVH."""

from __future__ import annotations

import asyncio
import os
from typing import Any

import aiohttp

from ovh_api.api.async_client import AsyncOvhClient
from ovh_api.core.config import find_config_file
from ovh_api.core.constants import EXIT_HTTP_ERROR, EXIT_OK
from ovh_api.core.exceptions import ConfigurationError, TransportError
from ovh_api.core.logger import logger

COMMANDS = ("time", "get", "get-noauth", "delete", "post", "put")
BODIED_COMMANDS = ("post", "put")


def criar_cliente(
    config_path: str | os.PathLike[str] | None = None,
    use_env: bool = False,
    env_file: str | os.PathLike[str] | None = None,
    timeout: float | None = None,
) -> AsyncOvhClient:
    """Cria o cliente a partir do ambiente ou de um ovh.conf.

    Args:
        config_path: Arquivo ovh.conf explicito.
        use_env: Quando True, usa variaveis OVH_* (e o arquivo dotenv).
        env_file: Arquivo dotenv opcional.
        timeout: Timeout em segundos, None para nenhum.

    Returns:
        Cliente assincrono configurado.
    """
    if use_env:
        return AsyncOvhClient.from_env(env_file, timeout=timeout)

    path = config_path if config_path is not None else find_config_file()
    if path is None:
        raise ConfigurationError("no config file found (ovh.conf, ~/.ovh.conf, /etc/ovh.conf)")
    logger.debug("Using config file %s", path)
    return AsyncOvhClient.from_conf(path, timeout=timeout)


async def executar_comando(
    client: AsyncOvhClient,
    command: str,
    path: str | None = None,
    data: Any = None,
) -> int:
    """Executa um comando e imprime status e corpo da resposta.

    Returns:
        Codigo de saida: 0 para 2xx, 1 para outros status HTTP.
    """
    async with client:
        if command == "time":
            delta = await client.time_delta()
            print(delta)
            return EXIT_OK

        if path is None:
            raise ValueError(f"command {command!r} requires a path")

        if command == "get":
            response = await client.get(path)
        elif command == "get-noauth":
            response = await client.get_noauth(path)
        elif command == "delete":
            response = await client.delete(path)
        elif command == "post":
            response = await client.post(path, data)
        elif command == "put":
            response = await client.put(path, data)
        else:
            raise ValueError(f"unknown command {command!r}")

        try:
            body = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as exc:
            raise TransportError(f"reading {command.upper()} {path} response failed: {exc}", cause=exc) from exc
        finally:
            response.release()

    print(f"HTTP {response.status}")
    if body:
        print(body)

    if 200 <= response.status < 300:
        return EXIT_OK
    logger.warning("%s %s returned HTTP %s", command.upper(), path, response.status)
    return EXIT_HTTP_ERROR
