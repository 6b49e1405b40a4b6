from settings.common import *

# Enable debugging
DEBUG = True

for logger_name in ("importer", "boxes"):
    LOGGING["loggers"][logger_name]["level"] = os.environ.get("LOG_LEVEL", "INFO")
