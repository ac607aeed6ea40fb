import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    '''Configure the root logger for the whole service.'''
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )
