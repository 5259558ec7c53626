"""HTTP API for extraction, generation, preview, deployment and downloads."""
