"""Allow ``python -m keepids``."""

from __future__ import annotations

from keepids.cli.main import main

raise SystemExit(main())
