"""
valdn - declarative validation of nested values by path-keyed rule tables

This package provides:
- A rule registry with built-in rules (required, min, max, email, ...)
- Path-keyed rule tables with wildcard entries ("tags.*")
- Rule annotations on pydantic model and dataclass fields
- Validation of records, maps, lists, JSON documents and Quart requests
- A `valdn` command line tool for validating JSON files

    errors = validate_map({"user": {"name": ""}}, {"user.name": ["required"]})
    # {"user.name": "user.name is required"}
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"

from .config import ValidationConfig, load_config
from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .decorators import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
