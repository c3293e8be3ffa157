"""Core encoder domain: models, ports, formatter and dedupe engine."""
