"""
Regenerate data/research-generated.json from public/research/<folder>/index.md.

Usage:
    python scripts/generate_research.py
"""
import sys
from pathlib import Path

# Allow imports from the project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from labsite.main import generate_research


if __name__ == "__main__":
    generate_research()
