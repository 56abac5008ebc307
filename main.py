import uvicorn
from dotenv import load_dotenv
from loguru import logger
from healthbot.settings import Settings
from healthbot.web import create_app

load_dotenv(dotenv_path=".env")

settings = Settings.from_env()
app = create_app(settings)

if __name__ == "__main__":
    logger.info("HealthBot running at http://localhost:{}", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
