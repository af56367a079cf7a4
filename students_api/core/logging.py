# students_api/core/logging.py
import logging
import sys


# Configure standard Python logging
def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout) # Print logs to console
        ]
    )
    return logging.getLogger("students_api")


logger = logging.getLogger("students_api")
