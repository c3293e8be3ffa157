"""Adapters connecting the encoder core to its collaborators."""
