# __init__.py - jdutils package initialization
from .jd_parsing import *
from .helpers import *
from .config import config
from .logger import timing_decorator, app_logger
