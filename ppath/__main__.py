import sys
from pathlib import Path

import ppath.cli.main as main_cli


def main():
    curr_dir = Path.cwd().resolve()
    sys.exit(main_cli.run(sys.argv[1:], cwd=curr_dir))


if __name__ == "__main__":
    main()
