import uvicorn

from config import settings
from utils.logger import get_logger

logger = get_logger(__name__)


def main():
    # mainモジュールからappオブジェクトを直接インポート
    from main import create_app

    app = create_app(settings)
    logger.info(f"Server starting on {settings.SERVER_HOST}:{settings.SERVER_PORT}")
    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT, reload=False, workers=1)


if __name__ == "__main__":
    main()
