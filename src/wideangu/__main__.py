"""Allow `python -m wideangu` to start the server."""

from wideangu.main import run

run()
