import logging


## logging

def make_simple_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    logger: logging.Logger = logging.getLogger(name)
    logger.setLevel(level)
    ch = logging.StreamHandler()
    fmt = ('[%(asctime)s] - %(levelname)8s - '
           '%(name)14s - '
           '%(filename)16s:%(lineno)-4d - '
           '%(message)s')
    formatter = logging.Formatter(fmt)
    ch.setFormatter(formatter)
    logger.addHandler(ch)
    return logger


log: logging.Logger = make_simple_logger('nuri')
