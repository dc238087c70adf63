# =============================================================================
# main.py  —  Entry Point for the HUDU MCP Server
# =============================================================================
#
# HOW TO RUN:
#   HUDU_API_KEY=... HUDU_BASE_URL=https://yourcompany.huducloud.com \
#       uv run python main.py
#
#   or, once installed:  hudu-mcp
#
# WHAT HAPPENS:
#   1. Loads a .env file if present (HUDU_API_KEY, HUDU_BASE_URL, ...)
#   2. Sends logs to stderr (stdout belongs to the MCP protocol)
#   3. Builds an immutable HuduConfig from the environment
#   4. Checks the key/URL against HUDU's api_info endpoint
#   5. Serves the tools over stdio until the host closes the pipe
#
# EXIT STATUS:
#   0 on a clean shutdown, 1 when configuration or the connection check fails.
# =============================================================================

import asyncio
import os
import sys

from dotenv import load_dotenv

# Load environment variables from .env file (HUDU_API_KEY, HUDU_BASE_URL, etc.)
# This must happen BEFORE the config is read.
load_dotenv()

from core.config import HuduConfig
from core.errors import ConfigurationError, HuduStartupError
from tools.log import configure_logging, logger
from tools.mcp_server import serve


def main() -> int:
    configure_logging(os.environ.get("HUDU_LOG_LEVEL", "INFO"))

    try:
        config = HuduConfig.from_env()
        asyncio.run(serve(config))
    except (ConfigurationError, HuduStartupError) as exc:
        logger.error(f"Failed to start server: {exc}")
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
