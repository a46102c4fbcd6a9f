import os
bind = "0.0.0.0:" + os.getenv("PORT", "10000")
workers = int(os.getenv("WEB_CONCURRENCY", "1"))
timeout = int(os.getenv("GUNICORN_TIMEOUT", "120"))
loglevel = os.getenv("LOG_LEVEL", "info").lower()
accesslog = "-"
wsgi_app = "app:create_app()"
