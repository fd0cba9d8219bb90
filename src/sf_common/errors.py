"""Internal error codes and exceptions.

None of these reach callers of the ID generator: every failure below is
caught where it is raised and degraded to a fallback value plus a warning.

Error code ranges:
  1xxx: Identity (datacenter id resolution)
"""


class AppError(Exception):
    """Base application error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 1xxx: Identity ---

class NetworkIdentityError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1001, f"Could not enumerate network interfaces: {detail}")


class NoEligibleInterfaceError(AppError):
    def __init__(self) -> None:
        super().__init__(1002, "No non-loopback interface with a hardware address")
