"""Exception hierarchy for winres.

Every error raised by the package derives from WinresError so a build script
can catch a single type. Component-specific errors live next to the code that
raises them and are re-exported here.
"""


class WinresError(Exception):
    """Base exception for all winres errors."""
    pass


class MissingEnvironmentError(WinresError):
    """Raised when a required cargo environment variable is not set."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Required environment variable not set: {variable}")


class ManifestReadError(WinresError):
    """Raised when Cargo.toml exists but cannot be read."""
    pass


class ResourceScriptError(WinresError):
    """Raised when the resource script cannot be written."""
    pass


class ToolchainError(WinresError):
    """Base exception for resource toolchain failures."""
    pass


class ToolchainInvocationError(ToolchainError):
    """Raised when a toolchain process could not be started."""
    pass


class CompileError(ToolchainError):
    """Raised when the resource compiler exits with a non-zero status."""

    kind = "compile error"


class ArchiveError(ToolchainError):
    """Raised when the archiver exits with a non-zero status."""

    kind = "archive error"


class ToolkitNotFoundError(ToolchainError):
    """Raised when no toolkit path is known for a toolkit that needs one."""
    pass


class UnsupportedToolkitError(ToolchainError):
    """Raised when neither the MSVC nor the GNU toolkit is targeted."""
    pass


class SDKLocatorError(WinresError):
    """Raised when the registry query for Windows SDKs cannot be run."""
    pass
