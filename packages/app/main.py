import sys

from lib_figure.demo.ballerina_3d import main as viewer_main

"""App entrypoint that opens the ballerina viewer.

Command line arguments are forwarded to the viewer (see
`lib_figure/demo/ballerina_3d.py` for the list of options).
"""


def main():
    return viewer_main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
