"""
Main entry point for buddybot when run as a module.

Allows execution via: python -m buddybot

buddybot/src/buddybot/__main__.py
"""

from .cli import main

if __name__ == "__main__":
    main()
