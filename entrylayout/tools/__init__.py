"""entrylayout.tools package

Command line utilities (resolve JSON entries, benchmarks).

Keep this package's __init__ free of eager imports so `python -m
entrylayout.tools.<name>` has no import-time side effects.
"""

__all__: list[str] = []
