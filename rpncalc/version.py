"""A module that centralizes the version information for rpncalc.

Changing the version here affects both the version printed with the ``--version`` command line option and the version
used by the build system.
"""

__version__ = "0.1.0"
VERSION_STRING = __version__

__version_tuple__ = tuple(int(x) if x.isdigit() else x for x in __version__.split('.'))


if __name__ == '__main__':
    print(VERSION_STRING)
