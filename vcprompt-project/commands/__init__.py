# This file makes the 'commands' directory a Python package

from . import prompt
