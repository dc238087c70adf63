# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the MCP side of the server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the LLM host and core/:
#     1. handlers.py declares every tool and what it does with HUDU
#     2. router.py dispatches calls and maps failures to the MCP taxonomy
#     3. mcp_server.py registers the tools with FastMCP and serves stdio
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP themselves (that's core/hudu_client.py)
#   - They do NOT decide how big a reply may be (that's core/truncation.py)
# =============================================================================
