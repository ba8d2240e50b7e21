"""cvkit: CV upload parsing (text extraction, normalization, basic identity fields)."""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

try:
    __version__ = _pkg_version("cvkit")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0"
