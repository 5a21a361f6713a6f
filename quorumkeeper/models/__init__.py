"""Data models for quorumkeeper."""
