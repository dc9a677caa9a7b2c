"""Data contracts for the HTTP API."""
