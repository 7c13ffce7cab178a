#!/usr/bin/env python3
"""
Convenience script to run the verification-form CLI from a checkout.
"""

import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))


def run_cli():
    """Run the CLI application."""
    from caseflow_forms.cli import app
    app()


if __name__ == "__main__":
    run_cli()
