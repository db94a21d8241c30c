import logging
import logging.config

from .bit import *
from .unsigned import UnsignedBits, One, Bit0, Bit1, Unsigned, Zero, Pos
from .signed import SignedBits, Edge, Cons, Signed, Constant, NonConstant
from .error_types import BitnumError, NotANaturalError, MalformedValueError, MissingStrategyError
from .config import CONFIG
from . import unsigned
from . import bitwise
from . import signed
from . import arith
from . import strategies
from . import grapher

def enableLogging(debug=False):
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,

        'formatters': {
            'default': {
                'format': '[{asctime}] {levelname}, {name}: {message}',
                'datefmt': '%Y/%m/%d %H:%M:%S',
                'style': '{',
            },
        },

        'handlers': {
            'stdout': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
                'stream': 'ext://sys.stdout',
            },
        },

        'root': {
            'level': logging.DEBUG if debug else logging.INFO,
            'handlers': ['stdout'],
        },
    })
