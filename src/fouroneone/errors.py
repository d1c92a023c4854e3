"""Package-wide error definitions."""

# ============================================================================
#                           General errors
# ============================================================================


class FouroneoneError(Exception):
    """Base class for fouroneone errors."""


# ============================================================================
#                   Interactive / web helper errors
# ============================================================================


class PromptAbortedError(FouroneoneError):
    """Raised when input ends before a non-empty answer is read."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Input ended while waiting for '{label}'.")
        self.label = label


class HeaderInjectionError(FouroneoneError):
    """Raised when a header value would split the response headers."""

    def __init__(self, header: str, value: str) -> None:
        super().__init__(
            f"Refusing to send {header} header containing CR/LF: {value!r}"
        )
        self.header = header
        self.value = value


# ============================================================================
#                   Site registry errors
# ============================================================================


class SiteError(FouroneoneError):
    """Base class for site registry errors."""


class DuplicateSiteError(SiteError):
    """Raised when a site is registered for a host that already has one."""

    def __init__(self, host: str) -> None:
        super().__init__(f"A site is already registered for host '{host}'.")
        self.host = host
