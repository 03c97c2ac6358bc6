"""CLI entry point: python -m structschema -type=User user.go."""

from __future__ import annotations

from structschema.cli.main import main

if __name__ == "__main__":
    main()
