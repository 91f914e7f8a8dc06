import sys

from mrucombo.demo import main

if __name__ == "__main__":
    sys.exit(main())
