"""Infrastructure: ``astro dev``: serve the project while editing.

Pages are served straight from the pages directory, with the public
directory as a fallback for assets.
"""

from __future__ import annotations

from http.server import ThreadingHTTPServer

from astro_cli import logger
from astro_cli.core.config import AstroConfig
from astro_cli.exceptions import ServerError
from astro_cli.infra.static_server import server_url, start_static_server
from astro_cli.logger import LoggingOptions


def dev_server(config: AstroConfig, *, logging: LoggingOptions) -> ThreadingHTTPServer:
    """Start the dev server and return once it is listening."""
    if not config.pages.is_dir():
        raise ServerError(
            f"Pages directory not found: {config.pages}",
            hint="Create it, or point `pages` in astro.config.toml at your pages.",
        )

    roots = [config.pages]
    if config.public.is_dir():
        roots.append(config.public)
    logger.debug(logging, "dev", f"serving {', '.join(str(r) for r in roots)}")

    server = start_static_server(
        roots,
        host=config.dev.hostname,
        port=config.dev.port,
        logging=logging,
        label="dev",
    )
    logger.info(logging, "dev", f"Server started, local: {server_url(server, config.dev.hostname)}")
    return server
