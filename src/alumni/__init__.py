"""Alumni showcase: dataset parsing, department filtering, paginated cards."""

from alumni._version import __version__, __build__

__all__ = ["__version__", "__build__"]
