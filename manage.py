#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
from __future__ import annotations

import os
import sys


def main() -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings")
    from django.conf import settings
    from django.core.management import execute_from_command_line

    argv = list(sys.argv)
    if argv[1:] == ["runserver"]:
        argv.append(f"0.0.0.0:{settings.PORT}")
    execute_from_command_line(argv)


if __name__ == "__main__":
    main()
