import subprocess
import sys
import logging

from mealmate.core.logging_config import setup_logging

setup_logging(logging.INFO)
logger = logging.getLogger(__name__)


def run():
    logger.info("🚀 Starting MealMate...")
    frontend = subprocess.Popen(
        ["streamlit", "run", "mealmate/frontend.py", "--server.port", "8501"],
        stdout=sys.stdout,
        stderr=sys.stderr
    )

    logger.info("✅ MealMate is running:")
    logger.info("   👉 UI:  http://localhost:8501")
    logger.info("Press Ctrl+C to stop.")

    try:
        frontend.wait()
    except KeyboardInterrupt:
        logger.info("🛑 Stopping MealMate...")
        frontend.terminate()
        logger.info("Done.")


if __name__ == "__main__":
    run()
