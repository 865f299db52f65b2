"""A dev entrypoint for running the Ulys HTTP API."""

import os

from ulys import create_app

app = create_app(os.getenv("ENV", "development"))

if __name__ == "__main__":
    app.run(port=8888, debug=True)
