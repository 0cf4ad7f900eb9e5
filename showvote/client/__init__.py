"""Terminal client for the Show Vote API."""
