"""Run the task API locally: python -m task_api"""
import uvicorn

from .main import app
from .utils.logging import get_logger


def run_server():
    settings = app.state.settings
    get_logger().info("Servidor rodando em %s", settings.public_url)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="warning")


if __name__ == "__main__":
    run_server()
