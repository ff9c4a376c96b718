"""
Terminal trivia quiz game with a persistent leaderboard.
"""
