# Request-scoped FastAPI dependencies (authentication, service wiring).
