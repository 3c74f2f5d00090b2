# Gunicorn configuration file
# Serve with: gunicorn hints_app:app

# Timeout for workers (in seconds)
# Long enough for the one nytbee.com scrape each day
timeout = 60

# Number of worker processes
workers = 2

# Binding
bind = "0.0.0.0:8080"

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
