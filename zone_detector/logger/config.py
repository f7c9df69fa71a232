import os

# Configuration from environment
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Log format: time | LEVEL | module | message
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Loggers created by this package hang off this name
ROOT_LOGGER_NAME = "zone_detector"
