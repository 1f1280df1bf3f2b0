import logging
import sys

from core.config import settings


def configure_logging(level: str | None = None) -> None:
    """
    Configure logging for the whole console.
    Call this once before the first Streamlit page renders.
    """
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


logger = logging.getLogger("grantiq_review")
