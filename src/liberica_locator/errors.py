"""Error types raised while locating Liberica releases."""

import logging
from typing import Any, Dict, Optional

from liberica_locator.constants import ERROR_HINT


class LocatorError(Exception):
    """Base error class for the locator."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class NoMatchError(LocatorError):
    """No remote tag satisfies the requested version."""

    def __init__(self, java_version: str, graalvm_version: Optional[str] = None):
        details = {"java_version": java_version}
        if graalvm_version:
            details["graalvm_version"] = graalvm_version
            requested = f"JDK{java_version} with GraalVM {graalvm_version}"
        else:
            requested = f"JDK{java_version}"
        super().__init__(
            f"Unable to find the latest version for {requested}. "
            f"Please make sure the java-version is set correctly. {ERROR_HINT}",
            details=details,
        )
        self.java_version = java_version
        self.graalvm_version = graalvm_version


class AssetNotFoundError(LocatorError):
    """The release exists but carries no asset for this package and platform."""

    def __init__(self, java_version: str, java_package: Optional[str], platform: str):
        super().__init__(
            f"Unable to find asset for java-version: {java_version}, "
            f"java-package: {java_package}, platform: {platform}",
            details={
                "java_version": java_version,
                "java_package": java_package,
                "platform": platform,
            },
        )
        self.java_version = java_version
        self.java_package = java_package
        self.platform = platform


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Log an error with context."""
    logger = logger or logging.getLogger(__name__)

    error_info: Dict[str, Any] = {
        "error_type": error.__class__.__name__,
        "error_message": str(error),
    }
    if context:
        error_info["context"] = context
    if isinstance(error, LocatorError):
        error_info["details"] = error.details

    logger.error("Locator error occurred", extra={"data": error_info})
