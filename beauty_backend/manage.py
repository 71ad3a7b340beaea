#!/usr/bin/env python
"""
PATH: manage.py

Runs against backend.settings.dev unless DJANGO_SETTINGS_MODULE names a
concrete settings module. "backend.settings" on its own is a package that
loads nothing, so it is treated as unset.

Deployments set DJANGO_SETTINGS_MODULE=backend.settings.prod and run
`manage.py ensure_superuser` once the database is migrated.
"""

from __future__ import annotations

import os
import sys

DEFAULT_SETTINGS = "backend.settings.dev"


def main() -> None:
    selected = os.environ.get("DJANGO_SETTINGS_MODULE", "").strip()
    if selected in ("", "backend.settings"):
        os.environ["DJANGO_SETTINGS_MODULE"] = DEFAULT_SETTINGS

    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
