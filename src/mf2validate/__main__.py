"""Allow running mf2validate as a module: python -m mf2validate."""

from mf2validate.cli import main

raise SystemExit(main())
