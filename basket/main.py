import logging
import sys

import uvicorn
from basket.api.api_run import app
from basket.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from basket.utilities.network import build_urls

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = LOG_LEVEL) -> logging.Handler:
    """Send application and uvicorn logs through one stdout handler."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT, handlers=[handler])
    for logger_name in ["uvicorn", "uvicorn.access"]:
        uv_logger = logging.getLogger(logger_name)
        uv_logger.handlers.clear()
        uv_logger.propagate = False
        uv_logger.addHandler(handler)
    return handler


if __name__ == "__main__":
    configure_logging()
    urls = build_urls(APP_PORT)
    print(f"Uvicorn running on {urls[0]} (Press CTRL+C to quit)")
    # The LAN address is what a phone scanning a share QR code can reach
    for url in urls[1:]:
        print(f"Accessible from other devices at: {url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_config=None)
