import logging

from app.application import App
from app.core.config import settings

application = App()
application.initialize(settings.DB_USER, settings.DB_PASSWORD, settings.DB_NAME)

app = application.router


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    application.run(settings.LISTEN_ADDR)
