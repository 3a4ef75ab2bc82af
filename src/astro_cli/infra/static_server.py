"""Infrastructure: background static-file HTTP server.

Shared by ``dev`` and ``preview``.  The server runs on a daemon thread
and :func:`start_static_server` returns as soon as the socket is bound,
leaving it to the CLI boundary to keep the process alive.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Sequence
from functools import partial
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any

from astro_cli import logger
from astro_cli.exceptions import ServerError
from astro_cli.logger import LoggingOptions


class _StaticHandler(SimpleHTTPRequestHandler):
    """Serve files from the first root that has them."""

    def __init__(
        self,
        *args: Any,
        roots: Sequence[Path],
        logging: LoggingOptions,
        label: str,
        **kwargs: Any,
    ) -> None:
        self.roots = tuple(str(root) for root in roots)
        self.logging = logging
        self.label = label
        super().__init__(*args, directory=self.roots[0], **kwargs)

    def translate_path(self, path: str) -> str:
        for root in self.roots:
            self.directory = root
            candidate = super().translate_path(path)
            if os.path.exists(candidate):
                return candidate
        self.directory = self.roots[0]
        return super().translate_path(path)

    def log_message(self, format: str, *args: Any) -> None:
        logger.debug(self.logging, self.label, format % args)


def start_static_server(
    roots: Sequence[Path],
    *,
    host: str,
    port: int,
    logging: LoggingOptions,
    label: str,
) -> ThreadingHTTPServer:
    """Bind a server for *roots* on ``host:port`` and serve in the background.

    Raises
    ------
    ServerError
        When the address cannot be bound.
    """
    if not roots:
        raise ServerError("No directory to serve.")

    handler = partial(_StaticHandler, roots=roots, logging=logging, label=label)
    try:
        server = ThreadingHTTPServer((host, port), handler)
    except OSError as exc:
        raise ServerError(
            f"Could not listen on {host}:{port}: {exc.strerror or exc}",
            hint="Pick another port with --port, or stop the process using it.",
        ) from exc

    server.daemon_threads = True
    thread = threading.Thread(
        target=server.serve_forever,
        name=f"astro-{label}-server",
        daemon=True,
    )
    thread.start()
    return server


def server_url(server: ThreadingHTTPServer, hostname: str) -> str:
    """Human-facing URL for *server* (uses the bound port, not the requested one)."""
    port = server.server_address[1]
    shown = "localhost" if hostname in ("0.0.0.0", "::") else hostname
    return f"http://{shown}:{port}/"
