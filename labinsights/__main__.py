import uvicorn

from labinsights.config import settings


def main() -> None:
    uvicorn.run("labinsights.main:app", host=settings.app_host, port=settings.app_port, reload=settings.app_env == "dev")


if __name__ == "__main__":
    main()
