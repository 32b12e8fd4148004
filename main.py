# main.py
import sys
from itr_cli import main

if __name__ == "__main__":
    sys.exit(main())
