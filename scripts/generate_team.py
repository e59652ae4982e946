"""
Regenerate data/team-generated.json from public/team/<folder>/_index.md.

Usage:
    python scripts/generate_team.py
"""
import sys
from pathlib import Path

# Allow imports from the project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from labsite.main import generate_team


if __name__ == "__main__":
    generate_team()
