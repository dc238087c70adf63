# =============================================================================
# core/errors.py  —  Domain Exceptions
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Defines the exceptions raised by the core layer: configuration problems,
#   HUDU HTTP failures and transport failures.
#
# WHY NOT McpError HERE?
#   core/ never imports the MCP framework.  The tools/ layer catches these
#   and converts them into the protocol's error taxonomy at the boundary.
# =============================================================================


class HuduError(Exception):
    """Base class for every failure talking to (or configuring) HUDU."""


class ConfigurationError(HuduError):
    """Raised when required environment configuration is missing or invalid."""


class HuduApiError(HuduError):
    """HUDU answered with a non-2xx status.

    The message always carries the status in the form
    ``HUDU API Error (<status>): <detail>`` so callers further up can show it
    verbatim.
    """

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HUDU API Error ({status_code}): {detail}")


class HuduConnectionError(HuduError):
    """The request never produced a response (DNS, refused, timeout...)."""


class HuduStartupError(HuduError):
    """The startup connectivity check failed."""
