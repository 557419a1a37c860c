# run_server.py
import uvicorn

from boekhouding.config import get_settings
from boekhouding.logging_setup import configure_logging, get_logger


def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    log = get_logger("boekhouding.server")

    # PORT from the environment, default 3000
    log.info("Boekhouding app running on http://%s:%d", settings.host, settings.port)
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=False,
                log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
