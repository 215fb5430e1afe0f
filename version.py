import os

CURRENT_VERSION = "0.1.0"


# fetch the package version for the build
def get_version():
    """Return the package version, optionally overridden from the environment."""
    # Optionally override with environment variable
    if "PACKAGE_VERSION" in os.environ:
        return os.environ.get("PACKAGE_VERSION")

    return CURRENT_VERSION


__version__ = get_version()
