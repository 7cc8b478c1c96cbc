# What it does: Reads the optional user configuration file (~/.vcprompt, or $VCPROMPT_CONFIG)
# How it does: Parses an INI file with `configparser` and exposes the `[vcprompt]` keys `format` and `timeout`. Interpolation is turned off so '%' escapes in format strings are taken literally
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os

SECTION = 'vcprompt'
CONFIG_ENV = 'VCPROMPT_CONFIG'
DEFAULT_FORMAT = '%n:%b'

def get_config_path(): # Returns $VCPROMPT_CONFIG if set, otherwise ~/.vcprompt
    return os.environ.get(CONFIG_ENV) or os.path.join(os.path.expanduser('~'), '.vcprompt')

def read_config(config_path=None): # Reads and returns the configuration as a ConfigParser object; a missing file is an empty config
    if config_path is None:
        config_path = get_config_path()
    config = configparser.ConfigParser(interpolation=None)
    if os.path.exists(config_path):
        try:
            config.read(config_path)
        except configparser.Error as e:
            raise ValueError(f"Invalid config file {config_path}: {e}")
    return config

def get_format(config):
    return config.get(SECTION, 'format', fallback=DEFAULT_FORMAT)

def get_timeout(config, default): # Seconds allowed for the modification check, 0 means no limit
    try:
        timeout = config.getfloat(SECTION, 'timeout', fallback=default)
    except ValueError:
        raise ValueError(f"Invalid timeout in [{SECTION}]: {config.get(SECTION, 'timeout')!r}")
    if timeout < 0:
        raise ValueError(f"Invalid timeout in [{SECTION}]: must not be negative")
    return timeout
