# app/core/logging.py
import logging, os


def setup_logging(level: str | None = None):
    # DEBUG \ INFO；显式传入优先，其次环境变量
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
