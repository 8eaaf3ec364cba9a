# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Entry point for the date_and_time demo.

Usage:
    printf '2024-03-20\\n14:30\\n' | python -m date_and_time.demo

Reads a date line then a time line from stdin and writes a JSON report to
stdout.

Exit codes:
    0: Both inputs parsed
    1: At least one input was invalid, or an unexpected error occurred
"""

from __future__ import annotations

import sys

from .logging import configure_logging
from .report import Reporter
from .schema import DemoOutput, DemoSettings


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        configure_logging(DemoSettings())

        date_line = sys.stdin.readline()
        time_line = sys.stdin.readline()

        output = Reporter().run(date_line, time_line)
        print(output.model_dump_json())

        return 0 if output.success else 1

    except Exception as e:
        # Always emit valid JSON, even on unexpected errors
        error_output = DemoOutput(
            success=False,
            error=str(e),
            error_type=type(e).__name__,
        )
        print(error_output.model_dump_json())
        return 1


if __name__ == "__main__":
    sys.exit(main())
