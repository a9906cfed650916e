#!/usr/bin/env python3
"""
Main entry point for the frame-data bot
"""

from framebot.main import run

if __name__ == "__main__":
    run()
