"""WSGI entrypoint for hosting platforms that look for `wsgi.py`.

Exports a module-level `app` (Flask instance) so servers like Gunicorn can
import it directly: `from wsgi import app`. Importing this module connects to
MongoDB; an unreachable database makes the import fail.

Run it as a script to serve on HOST:PORT (localhost:3000 by default).
"""
import logging
import os

from employee_api import create_app

HOST = os.getenv("HOST", "localhost")
PORT = int(os.getenv("PORT", "3000"))

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# create and expose the Flask application instance expected by hosts
app = create_app()

if __name__ == "__main__":
    app.run(host=HOST, port=PORT)
