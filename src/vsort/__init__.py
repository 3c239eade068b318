"""Version sort: compare strings the way GNU ``sort -V`` and ``ls -v`` do."""

from vsort.versioning import (  # noqa: F401
    Ordering,
    VersionComparator,
    compare,
    sort,
    sort_key,
    sorted_versions,
)

__version__ = "0.1.0"
