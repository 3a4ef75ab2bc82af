"""Infrastructure: ``astro preview``: serve the production build."""

from __future__ import annotations

from http.server import ThreadingHTTPServer

from astro_cli import logger
from astro_cli.core.config import AstroConfig
from astro_cli.exceptions import ServerError
from astro_cli.infra.static_server import server_url, start_static_server
from astro_cli.logger import LoggingOptions


def preview(config: AstroConfig, *, logging: LoggingOptions) -> ThreadingHTTPServer:
    """Serve ``dist`` in the background and return once it is listening."""
    if not config.dist.is_dir():
        raise ServerError(
            f"No build found at {config.dist}",
            hint="Run `astro build` before `astro preview`.",
        )

    server = start_static_server(
        [config.dist],
        host=config.dev.hostname,
        port=config.dev.port,
        logging=logging,
        label="preview",
    )
    logger.info(logging, "preview", f"Preview server started, local: {server_url(server, config.dev.hostname)}")
    return server
