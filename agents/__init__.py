"""
Pentago decision agents.

- Open-line position evaluator
- Time-bounded alpha-beta search agent
- Random baseline agent
"""
