"""Allow running hostsnap with ``python -m hostsnap``."""
from .main import main

raise SystemExit(main())
