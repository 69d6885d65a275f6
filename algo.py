"""Script entry point: ``python algo.py --size 8 --show-solution``."""

from queenregions.analysis.cli import main


if __name__ == "__main__":
    main()
