"""Replace missing image crop references in post content.

Usage:
  python scripts/replace_crops.py --guidprefix https://example.com/ --bucket my-bucket \
    --bucketprefix wp-content/uploads --dry-run
  python scripts/replace_crops.py ... --storage local --upload-dir ./mirror   # list a local copy
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from crop_replace.cli import main


if __name__ == "__main__":
    sys.exit(main())
