# gunicorn.conf.py: Production server configuration.
#
# Run from backend/ with:
#   gunicorn api.main:app -c gunicorn.conf.py

import os

# Exactly one worker: the event store lives in process memory, and a second
# worker would hold a second, diverging copy of it. Concurrency comes from the
# worker's thread pool, which the store's lock already guards.
workers = 1
worker_class = "uvicorn.workers.UvicornWorker"

# Bind
bind = f"{os.getenv('HOST', '0.0.0.0')}:{os.getenv('PORT', '5000')}"

# Logging: write to stdout/stderr so the process manager (systemd, Docker, etc.)
# captures everything; structured JSON is handled by core/logging.py
accesslog = "-"
errorlog  = "-"
loglevel  = "info"

# Timeouts
timeout          = 30    # seconds before a worker is killed and restarted
keepalive        = 5     # seconds to wait for the next request on a keep-alive connection
graceful_timeout = 30    # seconds to finish in-flight requests on SIGTERM
