class ConfigLoadError(Exception):
    """
    Exception raised when the settings file or a project configuration cannot be loaded.

    This error is fatal at startup: the server refuses to run with a partial or
    malformed configuration.

    Attributes:
        path (str): The configuration file or directory that failed to load.
        reason (str): Description of the underlying failure.

    Example:
        >>> error = ConfigLoadError("settings.json", "file not found")
        >>> str(error)
        'Failed to load configuration from settings.json: file not found'
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load configuration from {path}: {reason}")


class UnknownProjectError(Exception):
    """
    Exception raised when a file-scoped endpoint names a project that is not registered.

    Tree and index endpoints never raise this; they fall back to the project index.

    Attributes:
        project_id (str): The identifier that could not be resolved.

    Example:
        >>> error = UnknownProjectError("missing")
        >>> error.project_id
        'missing'
        >>> str(error)
        'Invalid project'
    """

    def __init__(self, project_id: str) -> None:
        self.project_id = project_id
        super().__init__("Invalid project")


class AccessDeniedError(Exception):
    """
    Exception raised when a request is refused.

    This covers non-local callers while external browsing is disabled, and
    relative paths that would resolve outside a project root.

    Example:
        >>> str(AccessDeniedError())
        'Access denied'
    """

    def __init__(self, reason: str = "Access denied") -> None:
        super().__init__(reason)


class PathReadError(Exception):
    """
    Exception raised when a directory listing or file read fails.

    The message is the text of the underlying OS error so it can be passed
    straight back to the client.

    Attributes:
        path (str): The filesystem path that could not be read.
        error (OSError): The underlying OS error.

    Example:
        >>> error = PathReadError("/srv/missing", FileNotFoundError(2, "No such file or directory", "/srv/missing"))
        >>> str(error)
        "[Errno 2] No such file or directory: '/srv/missing'"
    """

    def __init__(self, path: str, error: OSError) -> None:
        self.path = path
        self.error = error
        super().__init__(str(error))
