import uvicorn

from post_preview.config import settings


def main() -> None:
    uvicorn.run("post_preview.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
