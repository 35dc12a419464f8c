"""Place Weather API"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("place-weather")
except PackageNotFoundError:
    __version__ = "dev"
