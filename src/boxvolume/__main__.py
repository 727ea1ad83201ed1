"""
Run with: python -m boxvolume
"""
import sys

from boxvolume.main import main

if __name__ == "__main__":
    sys.exit(main())
