"""mochi — a personal task tracker."""

from mochi.config import VERSION

__version__ = VERSION
