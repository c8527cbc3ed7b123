import sys

from jsondiffreport.cli import main

if __name__ == "__main__":
    sys.exit(main())
