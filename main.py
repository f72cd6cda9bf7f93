import sys

from frame_classifier.cli import main

if __name__ == "__main__":
    sys.exit(main())
