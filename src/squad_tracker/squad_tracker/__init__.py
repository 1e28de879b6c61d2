"""Squad Tracker package.

Feature modules (sessions, competitions, semesters, players, coaches) hold the
domain records and their repositories; ``stats`` holds the pure aggregation
engine and ``reports`` composes it for a thin Flask JSON layer.
"""
