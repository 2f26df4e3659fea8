import os

bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"
worker_class = "uvicorn.workers.UvicornWorker"

# The story cache lives in worker memory, so each worker keeps its own copy.
# One worker gives a single shared cache per process.
workers = int(os.getenv("WEB_CONCURRENCY", "1"))

timeout = 120             # hard kill after N seconds of no response
graceful_timeout = 30     # time to gracefully stop workers
keepalive = 75

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
