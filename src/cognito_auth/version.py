"""Package name and version, resolved from the installed distribution."""

from importlib.metadata import PackageNotFoundError, version

__all__ = ["PACKAGE_NAME", "PACKAGE_VERSION", "get_package_info"]

PACKAGE_NAME = "cognito-auth"

try:
    PACKAGE_VERSION = version(PACKAGE_NAME)
except PackageNotFoundError:
    PACKAGE_VERSION = "unknown"


def get_package_info() -> tuple[str, str]:
    """Get the package name and version as a tuple."""
    return PACKAGE_NAME, PACKAGE_VERSION
