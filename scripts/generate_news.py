"""
Regenerate data/news-generated.json from public/news/<folder>/index.md.

Usage:
    python scripts/generate_news.py
"""
import sys
from pathlib import Path

# Allow imports from the project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from labsite.main import generate_news


if __name__ == "__main__":
    generate_news()
