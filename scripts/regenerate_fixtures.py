#!/usr/bin/env python3
"""
Regenerate golden transcripts from the current featuretour implementation.

Usage:
    python scripts/regenerate_fixtures.py [policy]

If policy (propagate or swallow) is provided, only that transcript is
regenerated. Otherwise, all transcripts are regenerated.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from featuretour import ExceptionPolicy, run


FIXTURES_DIR = Path(__file__).parent.parent / "test" / "fixtures"


def regenerate_transcript(policy: ExceptionPolicy) -> None:
    """Regenerate one transcript (run(policy) -> <policy>.txt)."""
    exit_code, output = run(policy)
    path = FIXTURES_DIR / f"{policy.name.lower()}.txt"
    path.write_text(output + "\n")

    print(f"  {path.name}: exit code {exit_code}")


def main() -> int:
    """Main entry point."""
    target = sys.argv[1] if len(sys.argv) > 1 else None

    print("Regenerating fixtures...")
    FIXTURES_DIR.mkdir(parents=True, exist_ok=True)

    for policy in ExceptionPolicy:
        if target and policy.name.lower() != target:
            continue
        regenerate_transcript(policy)

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
