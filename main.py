import uvicorn

from papergen.config import Settings


def main():
    settings = Settings.from_env()
    print(f"🚀 Server running on port {settings.port}")
    uvicorn.run(
        "papergen.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
