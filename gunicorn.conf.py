"""
Gunicorn configuration for running the ArtistHub API outside Lambda.
Usage: gunicorn -c gunicorn.conf.py artisthub.main:app
"""
import os

# Server socket
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")
backlog = 2048

# Worker processes
workers = int(os.getenv("GUNICORN_WORKERS", 2))
worker_class = "uvicorn.workers.UvicornWorker"
worker_connections = 100

# Worker lifecycle
max_requests = 1000  # Recycle workers periodically
max_requests_jitter = 100

# Timeouts
timeout = 30
keepalive = 5
graceful_timeout = 30

# Process naming
proc_name = "artisthub_api"

# Server mechanics
daemon = False
pidfile = None
umask = 0
tmp_upload_dir = None

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()


# Server hooks
def on_starting(server):
    server.log.info("Starting ArtistHub API")


def when_ready(server):
    server.log.info("Gunicorn server is ready. Spawning workers")


def worker_int(worker):
    worker.log.info("Worker received INT or QUIT signal")
