import uvicorn

from hrms.app import create_app
from hrms.core.config.hrms_settings import get_settings

settings = get_settings()

app = create_app(settings)


def main():
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
