"""
# Section Replace: __main__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Entry point for `python -m secreplace`.
"""

from secreplace.cli import main

main()
