import logging
import os


def configure_logging(env_var="AGENDA_LOG_LEVEL"):
    level_name = os.getenv(env_var, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
