#!/usr/bin/env python3
"""
Entry point for running dhcp_topo as a module
This allows running: python -m dhcp_topo
"""

from .cli import app

if __name__ == "__main__":
    app()
