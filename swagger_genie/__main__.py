"""Package entry point for ``python -m swagger_genie``.

WHY: Users run the tool as ``python -m swagger_genie expand handler.go``
without installing the console script. Python's ``-m`` flag looks for
``__main__.py`` inside the package and executes it.

HOW: Delegates to the CLI's main(), which parses sys.argv.
"""

from swagger_genie.cli import main

if __name__ == "__main__":
    main()
