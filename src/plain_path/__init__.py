"""plain-path: expand a leading ``~`` in filesystem paths.

>>> from plain_path import expand
>>> expand("/etc/hosts")
'/etc/hosts'
"""

from .errors import HomeDirNotFound
from .expander import PLACEHOLDER, expand, starts_with_placeholder
from .home import HomeDirResolver, system_home_dir
from .path import PlainPath

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "HomeDirNotFound",
    "HomeDirResolver",
    "PLACEHOLDER",
    "PlainPath",
    "expand",
    "starts_with_placeholder",
    "system_home_dir",
]
