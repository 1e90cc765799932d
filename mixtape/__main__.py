"""Allow ``python -m mixtape``."""

from mixtape.infrastructure.cli.app import main

raise SystemExit(main())
