"""Base layer: models, errors, logging, HTTP pooling and timeouts."""
