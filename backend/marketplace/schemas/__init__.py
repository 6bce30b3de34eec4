# marketplace/schemas/__init__.py
"""
Schema module initialization.
Exports all schema classes from submodules for convenient imports.
"""
from .common import *
from .auth import *
from .template import *
from .favorite import *
