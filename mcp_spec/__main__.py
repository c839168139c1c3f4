"""Allow ``python -m mcp_spec``."""

from .server import main

main()
