'''
Logging level definitions and loading of the logging config from a file.
'''
from logging import DEBUG, addLevelName
from logging.config import fileConfig
from os import environ
from os.path import expanduser, isfile


__all__ = ['VERBOSE', 'configure']

# Define a custom log level.
VERBOSE = DEBUG - 5
addLevelName(VERBOSE, 'VERBOSE')

CONFIG_ENV = 'CONDITIONS_LOGGING_CONFIG'


def configure(path: str|None = None) -> bool:
    '''
    Load the logging config from path, $CONDITIONS_LOGGING_CONFIG, or
    ~/logging.config, whichever is found first. Returns whether a config file
    was loaded; a missing file is not an error.
    '''
    path = path or environ.get(CONFIG_ENV) or f"{expanduser('~')}/logging.config"
    if not isfile(path):
        return False
    fileConfig(path, disable_existing_loggers=False)
    return True
