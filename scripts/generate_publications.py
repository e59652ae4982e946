"""
Regenerate data/publications-generated.json from public/publications/<folder>/index.md.

Usage:
    python scripts/generate_publications.py
"""
import sys
from pathlib import Path

# Allow imports from the project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from labsite.main import generate_publications


if __name__ == "__main__":
    generate_publications()
