"""Config API domain."""

from .get_home_dir import get_home_dir
from .get_package_version import get_package_version
from .get_user_agent import get_user_agent
from .NavConfig import NavConfig

__all__ = [
    "NavConfig",
    "get_home_dir",
    "get_package_version",
    "get_user_agent",
]
