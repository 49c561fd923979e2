"""
Main entry point for the pathment_scanner package.

Allows running the scanner as: python -m pathment_scanner
"""

from pathment_scanner.cli import run

run()
