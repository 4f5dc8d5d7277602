"""Entry point for running as a module: python -m picdiskslimmer"""

from .app import main

if __name__ == "__main__":
    main()
