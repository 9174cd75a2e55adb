"""
Leaderboard client: storage adapters for the local and remote backends and
the controller that keeps the ranked participant list in sync with them.
"""
