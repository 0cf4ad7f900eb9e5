"""Infrastructure layer - adapters, stubs and observability for Show Vote."""
