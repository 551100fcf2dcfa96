import uvicorn

from batteryhub.config import settings
from batteryhub.logging_config import setup_logging


def main() -> None:
    setup_logging()
    uvicorn.run("batteryhub.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    main()
