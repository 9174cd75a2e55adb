"""
Types shared by the participant API service and the leaderboard client.
"""
