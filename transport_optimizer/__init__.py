"""Top-level package for the Transport Optimizer.

A small city network with bidirectional routes, shortest-path queries
and ticket booking. Build a ready-to-use session with:

    from transport_optimizer.container import Container
    from transport_optimizer.services import TransportService

    service = Container.create_default().resolve(TransportService)
"""
