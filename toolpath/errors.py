"""Errors raised when an executable cannot be resolved."""

from __future__ import annotations


class ResolutionError(Exception):
    """Base class for resolution failures.

    Attributes:
        executable_name: The name that was being resolved.
        env_var: The override variable consulted for that name.
    """

    def __init__(self, message: str, executable_name: str, env_var: str) -> None:
        super().__init__(message)
        self.executable_name = executable_name
        self.env_var = env_var


class OverrideInvalidError(ResolutionError):
    """The override variable is set but does not point to a runnable executable."""

    def __init__(self, executable_name: str, env_var: str, value: str) -> None:
        message = (
            f"`{env_var}` environment variable points to something that's not a valid executable: {value}"
        )
        super().__init__(message, executable_name, env_var)
        self.value = value


class ExecutableNotFoundError(ResolutionError):
    """No override is set and no search location produced a runnable executable."""

    def __init__(self, executable_name: str, env_var: str) -> None:
        message = (
            f"Failed to find `{executable_name}` executable. "
            f"Make sure `{executable_name}` is in `$PATH`, "
            f"or set `${env_var}` to point to a valid executable."
        )
        super().__init__(message, executable_name, env_var)
