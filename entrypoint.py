"""Service entrypoint. Loads configuration, then serves the app over TLS with uvicorn."""
import logging
import sys

import uvicorn
from pydantic import ValidationError

from quote_proxy.config.settings import Settings, set_settings
from quote_proxy.main import app

logger = logging.getLogger("quote_proxy")


def main() -> int:
    try:
        settings = Settings()
    except ValidationError as e:
        logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]).upper()
            logger.critical("%s: %s", field or "configuration", error["msg"])
        return 1
    set_settings(settings)

    uvicorn.run(
        app,
        host=settings.listen_host(),
        port=settings.listen_port(),
        ssl_certfile=settings.tls_cert_file,
        ssl_keyfile=settings.tls_key_file,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
