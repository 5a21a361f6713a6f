"""quorumkeeper - failover and rolling-upgrade decisions for quorum-based database clusters."""

__version__ = "0.1.0"
