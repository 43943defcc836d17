"""
numguess: a single-player number-guessing game.
"""
