"""Allow ``python -m betahub_mcp`` to start the stdio server."""

from .stdio_server import main

if __name__ == "__main__":
    main()
