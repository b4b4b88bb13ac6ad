"""Local FastAPI server entry point."""

from pathlib import Path

from dotenv import load_dotenv

from weather_lambda.config import get_settings
from weather_lambda.core.app_factory import create_app
from weather_lambda.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Configure structured logging (info to stdout, errors to stderr)
settings = get_settings()
setup_logging(settings.log_level, settings.log_format)

# Create application
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "weather_lambda.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
