# Gunicorn configuration for production
# Usage: gunicorn -c gunicorn.conf.py openlens.api.main:app

import multiprocessing
import os

bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8080")

# Each worker loads its own read-only copy of the corpus
default_workers = multiprocessing.cpu_count() * 2 + 1
workers = int(
    os.getenv("GUNICORN_WORKERS", os.getenv("WEB_CONCURRENCY", default_workers))
)

# Use Uvicorn workers for async support
worker_class = "uvicorn.workers.UvicornWorker"

timeout = int(os.getenv("GUNICORN_TIMEOUT", 30))
graceful_timeout = int(os.getenv("GUNICORN_GRACEFUL_TIMEOUT", 30))
keepalive = int(os.getenv("GUNICORN_KEEPALIVE", 5))

# Logging
accesslog = os.getenv("GUNICORN_ACCESS_LOG", "-")  # stdout
errorlog = os.getenv("GUNICORN_ERROR_LOG", "-")  # stderr
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")

# Access log format (JSON-friendly)
access_log_format = '{"time": "%(t)s", "status": %(s)s, "method": "%(m)s", "path": "%(U)s", "query": "%(q)s", "duration_ms": %(D)s, "remote_addr": "%(h)s"}'

proc_name = "openlens"
