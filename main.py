#!/usr/bin/env python3
"""
DNS Token Broker - Main Entry Point

This is the main entry point for the DNS Token Broker.
It can be run directly or imported as a module.
"""

from dns_token_broker.cli.main import main

if __name__ == "__main__":
    main()
