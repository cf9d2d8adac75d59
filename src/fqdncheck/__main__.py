"""Allow ``python -m fqdncheck``."""

from fqdncheck.cli import main

if __name__ == "__main__":
    main()
