"""klaw-option: an explicit Option type for Python 3.13+.

Option replaces "maybe None" values with a container that is either
Some(value) or Nothing(), and interoperates with the Ok/Err outcome type.

Flat imports (preferred):
    from klaw_option import Option, Some, Nothing, Ok, Err, result

Submodule imports (for organization):
    from klaw_option.option import Option
    from klaw_option.result import Ok, Err, Result, collect
    from klaw_option.async_ import AsyncResult
"""

# Configuration and logging
from klaw_option._config import OptionConfig, get_config, init
from klaw_option._logging import configure_logging, get_logger

# Async
from klaw_option.async_ import AsyncResult

# Decorators
from klaw_option.decorators import result

# Errors
from klaw_option.errors import Failure, FailureError, Propagate, ValueAbsentError

# Option types
from klaw_option.option import Nothing, Option, Some

# Outcome types
from klaw_option.result import Err, Ok, Result, collect

__all__ = [
    'AsyncResult',
    'Err',
    'Failure',
    'FailureError',
    'Nothing',
    'Ok',
    'Option',
    'OptionConfig',
    'Propagate',
    'Result',
    'Some',
    'ValueAbsentError',
    'collect',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'result',
]
