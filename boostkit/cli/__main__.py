"""
Entry point for running BoostKit CLI as a module.

Usage: python -m boostkit.cli [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
