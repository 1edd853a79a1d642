"""Allow ``python -m stickfx``."""

from stickfx.cli.main import main

if __name__ == "__main__":
    main()
