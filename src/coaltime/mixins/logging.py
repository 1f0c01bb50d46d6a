import logging

logger = logging.getLogger("coaltime")
