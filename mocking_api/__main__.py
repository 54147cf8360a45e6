import uvicorn

from mocking_api.config.settings import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "mocking_api.main:create_app",
        factory=True,
        host=settings.app.host,
        port=settings.app.port,
        log_level=settings.app.log_level.lower(),
    )


if __name__ == "__main__":
    main()
