"""Allow running as ``python -m panelgrid``."""

from .main import main

main()
