"""Module entrypoint for ``python -m mdfiletree``.

All argument parsing and settings resolution happen in ``mdfiletree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
