"""Allow running the resolver with ``python -m vpc_resolver``."""
import sys

from vpc_resolver.cli.main import main

sys.exit(main())
