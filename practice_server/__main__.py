import uvicorn

from practice_server.app import app
from practice_server.config import settings


def main() -> None:
    """Run the app under uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
