"""Allow ``python -m turnkit`` to run the arena CLI."""

from .arena import main

raise SystemExit(main())
