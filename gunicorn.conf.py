# Gunicorn configuration for Azure App Service
# Run with: gunicorn app.main:app -c gunicorn.conf.py
import os

# Bind to the host/port provided by the platform
bind = f"{os.getenv('HOST', '0.0.0.0')}:{os.getenv('PORT', '5000')}"

# One process: the app keeps a single database engine and event loop
workers = 1

# ASGI worker for FastAPI
worker_class = "uvicorn.workers.UvicornWorker"

# Long-running chatbot / document requests
timeout = 300

# Graceful timeout
graceful_timeout = 120

# Keep alive
keepalive = 5

# Log level
loglevel = "info"

# Access log
accesslog = "-"

# Error log
errorlog = "-"
