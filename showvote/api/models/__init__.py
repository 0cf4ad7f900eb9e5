"""Pydantic request/response models for the Show Vote API."""
