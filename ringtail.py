# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "ringbuf",
# ]
#
# [tool.uv.sources]
# ringbuf = { path = "." }
# ///
"""Print the last lines of a stream, kept in a fixed-size ring buffer."""

from ringbuf.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
