"""Bootstrap wiring: builds concrete adapters from configuration."""
