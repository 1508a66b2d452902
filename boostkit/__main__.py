"""
Entry point for running BoostKit as a module.

Usage: python -m boostkit [options]
"""

from boostkit.cli.parser import main

if __name__ == "__main__":
    main()
