"""alumni._version

Single place for runtime versioning / build identification.

The build CLI prints both values, which makes it easy to confirm which
project copy produced a given site.
"""

from __future__ import annotations

__version__ = "0.3.0"
__build__ = "2026-10-19"
