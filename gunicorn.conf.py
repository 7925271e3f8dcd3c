import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# One worker by default: scrape triggers are not coordinated across processes.
workers = int(os.environ.get("WEB_CONCURRENCY", "1") or 1)
threads = int(os.environ.get("GUNICORN_THREADS", "2") or 2)
# A triggered scrape downloads two pages without its own timeout.
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "120") or 120)

worker_class = os.environ.get("GUNICORN_WORKER_CLASS", "gthread")
