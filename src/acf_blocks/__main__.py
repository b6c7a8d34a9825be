"""Allow running acf-blocks as ``python -m acf_blocks``."""

from acf_blocks.cli import main

if __name__ == "__main__":
    main()
