#!/usr/bin/env python3
# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""
Main entry point for the BetaHub MCP Server.

Loads configuration, validates the BetaHub token and serves MCP over stdio.

Usage:
    BETAHUB_TOKEN=pat-xxxxx python run_server.py
    python run_server.py --token=tkn-xxxxx

Or, once installed:
    betahub-mcp --token=pat-xxxxx
"""

from betahub_mcp.stdio_server import main

if __name__ == "__main__":
    main()
