SERVICE_NAME = "rabbit_hook"
