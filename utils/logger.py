import logging
import sys
import uuid

from flask import g, has_request_context, request

LOG_FORMAT = "%(asctime)s [%(levelname)s] (ReqID:%(req_id)s) %(name)s: %(message)s"

logger = logging.getLogger(__name__)


class RequestIdFilter(logging.Filter):
    def filter(self, record):
        if has_request_context():
            record.req_id = getattr(g, "request_id", "N/A")
        else:
            record.req_id = "N/A"
        return True


def configure_logging(app):
    """
    Send application logs to stdout, tagged with a short per-request id.
    Safe to call more than once (tests build many apps).
    """
    root = logging.getLogger()
    if not any(getattr(h, "_fingertrack", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(RequestIdFilter())
        handler._fingertrack = True
        root.addHandler(handler)
    root.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    @app.before_request
    def assign_request_id():
        g.request_id = str(uuid.uuid4())[:8]
        logger.debug(f"Incoming {request.method} {request.path}")
