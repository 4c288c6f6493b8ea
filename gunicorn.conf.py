import os

# gunicorn -c gunicorn.conf.py app.main:app
bind = f"0.0.0.0:{os.getenv('PORT', 8000)}"
workers = int(os.getenv('WEB_CONCURRENCY', 2))
worker_class = "uvicorn.workers.UvicornWorker"
loglevel = os.getenv('LOG_LEVEL', 'info').lower()
accesslog = "-"
timeout = int(os.getenv('GUNICORN_TIMEOUT', 60))
graceful_timeout = 30
max_requests = 1000
max_requests_jitter = 100
# Each worker opens its own Database handle in the app lifespan
preload_app = False
