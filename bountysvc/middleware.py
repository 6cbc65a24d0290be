"""WSGI middleware shared by the service's routes."""

import logging

logger = logging.getLogger("bountysvc.access")


def logging_middleware(app):
    """Wrap a WSGI app so each request's method and path are logged before it runs."""

    def wrapped(environ, start_response):
        logger.info("%s %s", environ.get("REQUEST_METHOD", ""), environ.get("PATH_INFO", ""))
        return app(environ, start_response)

    return wrapped