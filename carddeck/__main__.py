"""python -m carddeck 入口"""

from carddeck.ui.cli.cli_demo import main

if __name__ == "__main__":
    main()
