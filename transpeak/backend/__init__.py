"""Flask backend for the translate and synthesize endpoints."""
