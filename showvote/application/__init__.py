"""Application layer - use cases orchestrating the Show Vote domain.

Services here depend on ports (protocols), never on concrete adapters.
"""
