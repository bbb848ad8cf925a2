"""Application layer - Dispatch and resource handlers.

Structure:
- versioning/: Route table, content negotiation and the dispatcher
- greetings/: Greeting and departing handlers, their route definitions
- errors/: Application error types returned by the dispatcher

The application layer orchestrates domain value objects; it knows nothing
about HTTP frameworks.
"""
