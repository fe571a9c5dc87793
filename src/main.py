"""Entry point kept minimal by delegating to Engine.

The engine owns the window and clock; the round logic lives in the `game`
package and can be driven without a display.
"""

from core.engine import Engine  # noqa: E402 (local import order)


def main():  # small wrapper for clarity / debuggers
    Engine().run()


if __name__ == "__main__":
    main()
