# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains everything that is not MCP wiring: configuration,
# the HUDU REST client, parameter normalization, the per-tool argument
# schemas and the response-size governor.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or the MCP SDK.  The truncator
#   and the normalizer are pure functions you can exercise in a bare REPL;
#   the client only needs httpx.
# =============================================================================
