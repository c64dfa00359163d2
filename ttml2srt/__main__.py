"""Package entry point for ``python -m ttml2srt``.

WHY: Users run the converter as ``python -m ttml2srt episode.xml`` when
the console script is not on PATH. Python's ``-m`` flag looks for
``__main__.py`` inside the package and executes it.
"""

from ttml2srt.cli import main

if __name__ == "__main__":
    main()
