"""
Epic Alignment Service.

Scores how well an epic's stories address the support-ticket intents a team
selected, and proposes new stories to close the gap.
"""

__version__ = "1.0.0"
