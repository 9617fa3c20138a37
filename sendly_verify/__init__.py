"""Sendly OTP verification server"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sendly-verify")
except PackageNotFoundError:
    __version__ = "dev"
